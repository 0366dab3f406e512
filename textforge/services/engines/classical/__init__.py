"""Classical ciphers: shift, mirror, affine, keyword, transposition and grid codes."""
