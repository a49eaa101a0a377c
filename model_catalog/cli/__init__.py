"""
Command-Line Interface Layer.

This package contains the Typer application and the Rich formatters used to
display catalog records, validation reports and archive checks.
"""
