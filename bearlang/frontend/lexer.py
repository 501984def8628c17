"""
Lexer module for bearlang.

This module provides a hand-written byte scanner for BearLang source text.
It converts source code into a lazy stream of tokens for the parser.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List


class TokenKind(Enum):
    """Token kinds for the BearLang language."""
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENTIFIER = "IDENTIFIER"
    INT = "INT"          # Any numeric literal, integer or float text
    FLOAT = "FLOAT"      # Reserved, never produced by the scanner
    TRUE = "TRUE"
    FALSE = "FALSE"

    # Type tags
    I8 = "I8"
    I16 = "I16"
    I32 = "I32"
    I64 = "I64"
    I128 = "I128"
    U8 = "U8"
    U16 = "U16"
    U32 = "U32"
    U64 = "U64"
    U128 = "U128"
    F32 = "F32"
    F64 = "F64"
    BOOL = "BOOL"

    # Arithmetic operators
    ASSIGN = "="
    ADD = "+"
    SUB = "-"
    ASTERISK = "*"
    DIV = "/"
    MOD = "%"
    INC = "++"
    DEC = "--"
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="

    # Bitwise operators
    OR = "|"
    AND = "&"
    XOR = "^"
    COMP = "~"
    LSHF = "<<"
    RSHF = ">>"
    OR_ASSIGN = "|="
    AND_ASSIGN = "&="
    XOR_ASSIGN = "^="

    # Comparison and logical operators
    NOT = "!"
    EQU = "=="
    NEQ = "!="
    GRT = ">"
    LES = "<"
    GEQ = ">="
    LEQ = "<="
    COR = "||"
    CAND = "&&"
    MATCH_BRANCH = "=>"

    # Delimiters
    COMMA = ","
    COLON = ":"
    SCOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACK = "["
    RBRACK = "]"

    # Keywords
    FN = "FN"
    LET = "LET"
    VOL = "VOL"
    STRUCT = "STRUCT"
    ENUM = "ENUM"
    UNION = "UNION"
    CONST = "CONST"
    RETURN = "RETURN"
    IF = "IF"
    ELIF = "ELIF"
    ELSE = "ELSE"
    MATCH = "MATCH"
    DEFAULT = "DEFAULT"
    FOR = "FOR"
    LOOP = "LOOP"
    WHILE = "WHILE"
    IMPORT = "IMPORT"


@dataclass(frozen=True)
class Token:
    """A single lexical unit.

    Attributes:
        kind: The token kind
        text: The literal source text of the token (empty for EOF)
    """
    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"


KEYWORDS: Dict[str, TokenKind] = {
    "fn": TokenKind.FN,
    "let": TokenKind.LET,
    "vol": TokenKind.VOL,
    "struct": TokenKind.STRUCT,
    "enum": TokenKind.ENUM,
    "union": TokenKind.UNION,
    "const": TokenKind.CONST,
    "return": TokenKind.RETURN,
    "if": TokenKind.IF,
    "elif": TokenKind.ELIF,
    "else": TokenKind.ELSE,
    "match": TokenKind.MATCH,
    "default": TokenKind.DEFAULT,
    "for": TokenKind.FOR,
    "loop": TokenKind.LOOP,
    "while": TokenKind.WHILE,
    "import": TokenKind.IMPORT,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "i8": TokenKind.I8,
    "i16": TokenKind.I16,
    "i32": TokenKind.I32,
    "i64": TokenKind.I64,
    "i128": TokenKind.I128,
    "u8": TokenKind.U8,
    "u16": TokenKind.U16,
    "u32": TokenKind.U32,
    "u64": TokenKind.U64,
    "u128": TokenKind.U128,
    "f32": TokenKind.F32,
    "f64": TokenKind.F64,
    "bool": TokenKind.BOOL,
}

# Kinds accepted after the colon of a let statement
TYPE_TAGS: FrozenSet[TokenKind] = frozenset({
    TokenKind.I8, TokenKind.I16, TokenKind.I32, TokenKind.I64, TokenKind.I128,
    TokenKind.U8, TokenKind.U16, TokenKind.U32, TokenKind.U64, TokenKind.U128,
    TokenKind.F32, TokenKind.F64, TokenKind.BOOL,
})

_WHITESPACE = " \t\n\r"

_SINGLE = {
    "*": TokenKind.ASTERISK,
    "/": TokenKind.DIV,
    "%": TokenKind.MOD,
    "~": TokenKind.COMP,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACK,
    "]": TokenKind.RBRACK,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ";": TokenKind.SCOLON,
}

# First byte -> (kind when alone, {second byte: two-byte kind})
_COMPOUND = {
    "=": (TokenKind.ASSIGN, {"=": TokenKind.EQU, ">": TokenKind.MATCH_BRANCH}),
    "+": (TokenKind.ADD, {"=": TokenKind.ADD_ASSIGN, "+": TokenKind.INC}),
    "-": (TokenKind.SUB, {"=": TokenKind.SUB_ASSIGN, "-": TokenKind.DEC}),
    "|": (TokenKind.OR, {"=": TokenKind.OR_ASSIGN, "|": TokenKind.COR}),
    "&": (TokenKind.AND, {"=": TokenKind.AND_ASSIGN, "&": TokenKind.CAND}),
    "!": (TokenKind.NOT, {"=": TokenKind.NEQ}),
    "<": (TokenKind.LES, {"=": TokenKind.LEQ, "<": TokenKind.LSHF}),
    ">": (TokenKind.GRT, {"=": TokenKind.GEQ, ">": TokenKind.RSHF}),
    "^": (TokenKind.XOR, {"=": TokenKind.XOR_ASSIGN}),
}

# Placeholder current character once past the end; end of input is decided
# by position so an embedded NUL still scans as ILLEGAL
_EOF_CHAR = "\0"


def lookup_ident(text: str) -> TokenKind:
    """Return the keyword kind for ``text``, or IDENTIFIER."""
    return KEYWORDS.get(text, TokenKind.IDENTIFIER)


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Scanner:
    """Scanner for tokenizing BearLang source code.

    Reads the input one character at a time, using a single character of
    lookahead to tell compound operators apart. Never raises: bytes it does
    not recognise come back as ILLEGAL tokens.

    Example:
        >>> scanner = Scanner("let x: u8 = 5;")
        >>> scanner.next_token()
        Token(LET, 'let')
    """

    def __init__(self, source: str):
        """Initialize the scanner and load the first character.

        Args:
            source: BearLang source code string
        """
        self._source = source
        self._pos = 0
        self._read_pos = 0
        self._ch = _EOF_CHAR
        self._read_char()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until EOF (the EOF token itself is not yielded)."""
        while True:
            token = self.next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token

    def next_token(self) -> Token:
        """Scan and return the next token.

        Returns:
            The next Token; EOF on every call once the input is exhausted
        """
        self._skip_whitespace()
        ch = self._ch

        if self._pos >= len(self._source):
            return Token(TokenKind.EOF, "")

        if ch in _COMPOUND:
            single, pairs = _COMPOUND[ch]
            follow = self._peek_char()
            if follow in pairs:
                self._read_char()
                self._read_char()
                return Token(pairs[follow], ch + follow)
            self._read_char()
            return Token(single, ch)

        if ch in _SINGLE:
            self._read_char()
            return Token(_SINGLE[ch], ch)

        if _is_letter(ch):
            text = self._read_identifier()
            return Token(lookup_ident(text), text)

        if _is_digit(ch):
            return Token(TokenKind.INT, self._read_number())

        self._read_char()
        return Token(TokenKind.ILLEGAL, ch)

    def _read_char(self) -> None:
        if self._read_pos < len(self._source):
            self._ch = self._source[self._read_pos]
        else:
            self._ch = _EOF_CHAR
        self._pos = self._read_pos
        self._read_pos += 1

    def _peek_char(self) -> str:
        if self._read_pos < len(self._source):
            return self._source[self._read_pos]
        return _EOF_CHAR

    def _skip_whitespace(self) -> None:
        while self._ch in _WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self._pos
        while _is_letter(self._ch) or _is_digit(self._ch):
            self._read_char()
        return self._source[start:self._pos]

    def _read_number(self) -> str:
        start = self._pos
        while _is_digit(self._ch) or self._ch == ".":
            self._read_char()
        return self._source[start:self._pos]


def tokenize(source: str) -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: BearLang source code string

    Returns:
        List of Token objects, ending with a single EOF token
    """
    scanner = Scanner(source)
    tokens = list(scanner)
    tokens.append(Token(TokenKind.EOF, ""))
    return tokens
