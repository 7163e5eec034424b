"""Alumni Connect backend package."""
