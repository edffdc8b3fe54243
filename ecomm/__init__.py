"""Product catalogue and order storage on MySQL, with a product service layer."""

__version__ = "0.1.0"