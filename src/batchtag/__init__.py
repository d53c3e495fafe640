"""batchtag: batch audio tag editing with filename format strings."""

__version__ = "0.1.0"
