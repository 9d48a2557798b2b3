from owl.reader.reader import Reader, SYMBOL_DELIMITERS

__all__ = ["Reader", "SYMBOL_DELIMITERS"]
