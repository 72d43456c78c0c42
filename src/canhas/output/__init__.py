"""CLI output: Rich console factory and result formatters."""
