from reading.devices.ereader import EReader
from reading.devices.paper_book import PaperBook

__all__ = ["EReader", "PaperBook"]
