"""Convert values between units of distance, mass and temperature."""

__version__ = "0.1.0"