"""A small menu-driven toolbox: calculator, Morse encoder and unit converters."""

__version__ = "1.0.0"
__all__ = ["calculator", "data_units", "menus", "morse", "numsys", "temperature"]