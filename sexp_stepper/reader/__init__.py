from sexp_stepper.reader.parser import lex, read_token, parse, TokenStream

__all__ = ["lex", "read_token", "parse", "TokenStream"]
