"""Small 2D pygame demos and the plain game logic behind them."""

__version__ = "0.1.0"