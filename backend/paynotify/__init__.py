"""paynotify: recognizes incoming bank transfers from notification text and screen OCR."""

__version__ = "0.1.0"
