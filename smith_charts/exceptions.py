"""
Custom exceptions for SmithCharts package.

The geometry core never raises for degenerate numbers; these classes cover
the surrounding workflow: configuration files, output, and CLI input.
"""


class SmithChartsError(Exception):
    """Base exception class for all SmithCharts errors."""
    pass


class RenderError(SmithChartsError):
    """
    Raised when chart rendering or saving fails.
    
    This can occur when saving a chart that has never been updated, or when
    Matplotlib fails to write the output file.
    """
    pass


class InvalidParameterError(SmithChartsError):
    """
    Raised for invalid user inputs.
    
    Used for explicit validation failures such as a negative margin or a
    non-positive line value in a configuration file or on the command line.
    """
    pass


class ConfigError(SmithChartsError):
    """Raised when a configuration file cannot be read or has an unsupported format."""
    pass
