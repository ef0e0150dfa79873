from invest_core.io.config import load_bracket_table, load_raw_inputs  # noqa: F401

__all__ = ["load_raw_inputs", "load_bracket_table"]
