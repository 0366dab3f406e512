"""Text transformation engine: codecs, ciphers, hashes and steganography in pipelines."""

__version__ = "0.1.0"
