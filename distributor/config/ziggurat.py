"""Built-in Ziggurat configurations."""

from .registry import register_ziggurat_config


@register_ziggurat_config("double")
def get_double_config():
    """256 boxes over a 64-bit state, producing float64 variates."""
    return {
        "name": "double",
        "n_boxes": 256,
        "r": 3.6541528853610088,
        "area": 0.00492867323399,
        "dtype": "float64",
        "state_bits": 64,
        "index_bits": 8,
        "sign_mask": 0x100,
        "uniform_bits": 53,
        "mix_xor": 0xF1357AEA2E62A9C5,
        "mix_mult": 0xABC98388FB8FAC03,
    }


def _get_base_float_config():
    return {
        "n_boxes": 128,
        "r": 3.442619855899,
        "area": 9.91256303526217e-3,
        "dtype": "float32",
        "index_bits": 7,
        "sign_mask": 0x80,
        "uniform_bits": 24,
    }


@register_ziggurat_config("float")
def get_float_config():
    """128 boxes over a 32-bit state, producing float32 variates."""
    base_config = _get_base_float_config()
    base_config["name"] = "float"
    base_config["state_bits"] = 32
    base_config["mix_xor"] = 0xF1357AEB
    base_config["mix_mult"] = 0xE19B01AD
    return base_config


@register_ziggurat_config("float_long")
def get_float_long_config():
    """128 boxes over a 64-bit state, producing float32 variates."""
    base_config = _get_base_float_config()
    base_config["name"] = "float_long"
    base_config["state_bits"] = 64
    base_config["mix_xor"] = 0xF1357AEA2E62A9C5
    base_config["mix_mult"] = 0xABC98388FB8FAC03
    return base_config
