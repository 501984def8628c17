"""
Parser module for bearlang.

This module provides a Pratt (precedence climbing) expression parser combined
with recursive descent for statements. It pulls tokens from a Scanner one at
a time and builds a syntax tree.

Parsing never raises. Problems are recorded as diagnostic strings and the
offending rule yields None, so a pass always reaches EOF and returns a
Program.
"""

import logging
from enum import IntEnum
from typing import Callable, Dict, List, Optional

from ..syntax import (
    Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression, Expr,
    LetStatement, ReturnStatement, ExpressionStatement, Stmt, Program, render,
)
from ..utils.settings import Settings, DEFAULT_SETTINGS
from .lexer import Scanner, Token, TokenKind, TYPE_TAGS

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[[], Optional[Expr]]
InfixParseFn = Callable[[Optional[Expr]], Optional[Expr]]

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


class Precedence(IntEnum):
    """Binding strength of operators, lowest to highest."""
    LOWEST = 1
    EQUALS = 2       # == !=
    LESSGREATER = 3  # < >
    SUM = 4          # + -
    PRODUCT = 5      # * /
    PREFIX = 6       # -x !x ~x
    CALL = 7


PRECEDENCES: Dict[TokenKind, Precedence] = {
    TokenKind.EQU: Precedence.EQUALS,
    TokenKind.NEQ: Precedence.EQUALS,
    TokenKind.LES: Precedence.LESSGREATER,
    TokenKind.GRT: Precedence.LESSGREATER,
    TokenKind.ADD: Precedence.SUM,
    TokenKind.SUB: Precedence.SUM,
    TokenKind.DIV: Precedence.PRODUCT,
    TokenKind.ASTERISK: Precedence.PRODUCT,
}

# Stable ordering for diagnostics that list every accepted type tag
_TYPE_TAG_NAMES = ", ".join(
    kind.value for kind in TokenKind if kind in TYPE_TAGS
)


def parse_integer(text: str) -> Optional[int]:
    """Convert numeric literal text to a signed 64-bit integer.

    A leading zero selects octal, matching C-family literals. Returns None
    when the text is not an integer or does not fit in 64 bits.
    """
    if not text.isdigit():
        return None
    base = 8 if len(text) > 1 and text[0] == "0" else 10
    try:
        value = int(text, base)
    except ValueError:
        return None
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


class Parser:
    """Pratt parser for BearLang.

    Holds the current token and one token of lookahead. Expression parsing
    dispatches on token kind through two tables: prefix functions for
    tokens that start an expression, infix functions for tokens that
    continue one.

    Example:
        >>> parser = Parser(Scanner("a + b * c;"))
        >>> program = parser.parse_program()
        >>> render(program)
        '(a + (b * c))'
    """

    def __init__(self, scanner: Scanner, settings: Optional[Settings] = None):
        """Initialize the parser and fill the current and peek tokens.

        Args:
            scanner: Token source
            settings: Parser settings (defaults to DEFAULT_SETTINGS)
        """
        self._scanner = scanner
        self._settings = settings or DEFAULT_SETTINGS
        self._errors: List[str] = []

        self._cur_token = Token(TokenKind.EOF, "")
        self._peek_token = Token(TokenKind.EOF, "")
        self._advance()
        self._advance()

        self._prefix_parse_fns: Dict[TokenKind, PrefixParseFn] = {}
        self._infix_parse_fns: Dict[TokenKind, InfixParseFn] = {}

        self._register_prefix(TokenKind.IDENTIFIER, self._parse_identifier)
        self._register_prefix(TokenKind.INT, self._parse_integer_literal)
        self._register_prefix(TokenKind.SUB, self._parse_prefix_expression)
        self._register_prefix(TokenKind.NOT, self._parse_prefix_expression)
        self._register_prefix(TokenKind.COMP, self._parse_prefix_expression)
        self._register_prefix(TokenKind.TRUE, self._parse_boolean)
        self._register_prefix(TokenKind.FALSE, self._parse_boolean)
        self._register_prefix(TokenKind.LPAREN, self._parse_group_expression)

        for kind in PRECEDENCES:
            self._register_infix(kind, self._parse_infix_expression)

    def errors(self) -> List[str]:
        """Return a snapshot of the diagnostics recorded so far."""
        return list(self._errors)

    def parse_program(self) -> Program:
        """Parse statements until EOF.

        Returns:
            Program: Root node holding every successfully parsed statement
        """
        statements: List[Stmt] = []

        while not self._cur_token_is(TokenKind.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("parsed statement: %s", render(stmt))
                statements.append(stmt)
            self._advance()

        return Program(statements=statements)

    def parse_statement(self) -> Optional[Stmt]:
        """Parse the statement starting at the current token."""
        kind = self._cur_token.kind
        if kind is TokenKind.LET:
            return self._parse_let_statement()
        elif kind is TokenKind.RETURN:
            return self._parse_return_statement()
        elif kind is TokenKind.SCOLON:
            # Empty statement
            return None
        return self._parse_expression_statement()

    # ==================== Statements ====================

    def _parse_let_statement(self) -> Optional[LetStatement]:
        let_token = self._cur_token

        if not self._expect_peek(TokenKind.IDENTIFIER):
            return self._abort_statement()
        name = Identifier(token=self._cur_token, value=self._cur_token.text)

        if not self._expect_peek(TokenKind.COLON):
            return self._abort_statement()

        if not self._expect_peek_type_tag():
            return self._abort_statement()
        type_tag = self._cur_token

        if not self._expect_peek(TokenKind.ASSIGN):
            return self._abort_statement()

        error_count = len(self._errors)
        value = self._parse_statement_value(allow_empty=False)
        if len(self._errors) > error_count:
            return None
        return LetStatement(token=let_token, name=name, type_tag=type_tag, value=value)

    def _parse_return_statement(self) -> Optional[ReturnStatement]:
        return_token = self._cur_token
        error_count = len(self._errors)
        value = self._parse_statement_value(allow_empty=True)
        if len(self._errors) > error_count:
            return None
        return ReturnStatement(token=return_token, value=value)

    def _parse_statement_value(self, allow_empty: bool) -> Optional[Expr]:
        """Handle the tail of a let/return statement after its keyword part.

        With capture_values the expression is parsed and returned; otherwise
        the tokens up to the semicolon are skipped. Either way the cursor ends
        on the terminating semicolon (or EOF). ``allow_empty`` permits a
        missing value (bare ``return;``); without it an empty initializer is
        reported like any other token that cannot start an expression.
        """
        self._advance()

        value = None
        at_end = self._cur_token_is(TokenKind.SCOLON) or self._cur_token_is(TokenKind.EOF)
        if self._settings.capture_values and not (allow_empty and at_end):
            value = self.parse_expression(Precedence.LOWEST)
            if value is not None and not self._peek_token_is(TokenKind.EOF):
                self._expect_peek(TokenKind.SCOLON)

        self._skip_to_semicolon()
        return value

    def _parse_expression_statement(self) -> Optional[ExpressionStatement]:
        first = self._cur_token
        expression = self.parse_expression(Precedence.LOWEST)

        if self._peek_token_is(TokenKind.SCOLON):
            self._advance()

        if expression is None:
            return None
        return ExpressionStatement(token=first, expression=expression)

    def _abort_statement(self) -> None:
        """Give up on the current statement, resynchronising if enabled."""
        if self._settings.error_recovery:
            self._skip_to_semicolon()
        return None

    def _skip_to_semicolon(self) -> None:
        while not self._cur_token_is(TokenKind.SCOLON) and not self._cur_token_is(TokenKind.EOF):
            self._advance()

    # ==================== Expressions ====================

    def parse_expression(self, precedence: Precedence) -> Optional[Expr]:
        """Parse an expression whose operators bind tighter than ``precedence``.

        Args:
            precedence: Minimum binding precedence for infix operators

        Returns:
            The expression node, or None if it could not be built
        """
        prefix = self._prefix_parse_fns.get(self._cur_token.kind)
        if prefix is None:
            self._no_prefix_parse_fn_error(self._cur_token.kind)
            return None

        left = prefix()

        while not self._peek_token_is(TokenKind.SCOLON) and precedence < self._peek_precedence():
            infix = self._infix_parse_fns.get(self._peek_token.kind)
            if infix is None:
                return left

            self._advance()
            left = infix(left)

        return left

    def _parse_identifier(self) -> Expr:
        return Identifier(token=self._cur_token, value=self._cur_token.text)

    def _parse_integer_literal(self) -> Optional[Expr]:
        token = self._cur_token
        value = parse_integer(token.text)
        if value is None:
            self._add_error(f"could not parse {token.text!r} as integer")
            return None
        return IntegerLiteral(token=token, value=value)

    def _parse_boolean(self) -> Expr:
        return Boolean(token=self._cur_token, value=self._cur_token_is(TokenKind.TRUE))

    def _parse_prefix_expression(self) -> Optional[Expr]:
        token = self._cur_token
        self._advance()

        right = self.parse_expression(Precedence.PREFIX)
        if right is None:
            return None
        return PrefixExpression(token=token, operator=token.text, right=right)

    def _parse_infix_expression(self, left: Optional[Expr]) -> Optional[Expr]:
        token = self._cur_token
        precedence = self._cur_precedence()
        self._advance()

        right = self.parse_expression(precedence)
        if left is None or right is None:
            return None
        return InfixExpression(token=token, left=left, operator=token.text, right=right)

    def _parse_group_expression(self) -> Optional[Expr]:
        self._advance()

        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None:
            return None

        if not self._expect_peek(TokenKind.RPAREN):
            return None
        return expression

    # ==================== Token helpers ====================

    def _advance(self) -> None:
        """Shift the peek token into current and pull a new peek token."""
        self._cur_token = self._peek_token
        self._peek_token = self._scanner.next_token()

    def _cur_token_is(self, kind: TokenKind) -> bool:
        return self._cur_token.kind is kind

    def _peek_token_is(self, kind: TokenKind) -> bool:
        return self._peek_token.kind is kind

    def _expect_peek(self, kind: TokenKind) -> bool:
        """Advance if the peek token has ``kind``; otherwise record an error."""
        if self._peek_token_is(kind):
            self._advance()
            return True
        self._add_error(
            f"expected next token to be {kind.value}, got {self._peek_token.kind.value} instead"
        )
        return False

    def _expect_peek_type_tag(self) -> bool:
        if self._peek_token.kind in TYPE_TAGS:
            self._advance()
            return True
        self._add_error(
            f"expected next token to be one of [{_TYPE_TAG_NAMES}], "
            f"got {self._peek_token.kind.value} instead"
        )
        return False

    def _peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self._peek_token.kind, Precedence.LOWEST)

    def _cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self._cur_token.kind, Precedence.LOWEST)

    def _register_prefix(self, kind: TokenKind, fn: PrefixParseFn) -> None:
        self._prefix_parse_fns[kind] = fn

    def _register_infix(self, kind: TokenKind, fn: InfixParseFn) -> None:
        self._infix_parse_fns[kind] = fn

    # ==================== Diagnostics ====================

    def _no_prefix_parse_fn_error(self, kind: TokenKind) -> None:
        self._add_error(f"no prefix parse function for {kind.value} found")

    def _add_error(self, message: str) -> None:
        logger.debug("parse error: %s", message)
        self._errors.append(message)
