"""Environment manager: track saved and ignored system packages in TOML files and keep the installed set in line."""

__version__ = "0.1.0"