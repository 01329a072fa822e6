"""Arithmetic expressions: parsing, checking, evaluation and formatting."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, Mapping, MutableSet

__all__ = [
    "ExprError",
    "Expr",
    "Var",
    "Literal",
    "Unary",
    "Binary",
    "Call",
    "parse",
    "format_expr",
]

_NUM_PARAMS = {"pow": 2, "sin": 1, "sqrt": 1}


class ExprError(Exception):
    """Raised when an expression cannot be parsed, checked or evaluated."""


def _quote_rune(ch: str) -> str:
    escapes = {"'": "\\'", "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}
    if ch in escapes:
        return f"'{escapes[ch]}'"
    if ch.isprintable():
        return f"'{ch}'"
    code = ord(ch)
    if code <= 0xFF:
        return f"'\\x{code:02x}'"
    if code <= 0xFFFF:
        return f"'\\u{code:04x}'"
    return f"'\\U{code:08x}'"


def _format_g(value: float) -> str:
    """Format a float in the shortest %g form."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    number = Decimal(repr(value)).normalize()
    sign, digits, exp = number.as_tuple()
    nd = len(digits)
    x = nd + exp - 1
    eprec = 6
    if eprec > nd and nd >= x + 1:
        eprec = nd
    prefix = "-" if sign else ""
    if x < -4 or x >= eprec:
        mantissa = str(digits[0])
        rest = "".join(map(str, digits[1:]))
        if rest:
            mantissa += "." + rest
        esign = "-" if x < 0 else "+"
        return f"{prefix}{mantissa}e{esign}{abs(x):02d}"
    return f"{number:f}"


class Expr(ABC):
    """An arithmetic expression."""

    @abstractmethod
    def eval(self, env: Mapping[str, float] | None) -> float:
        """Return the value of this expression in env."""

    @abstractmethod
    def check(self, vars: MutableSet[Var]) -> None:
        """Raise ExprError on a problem; add the variables used to vars."""


@dataclass(frozen=True)
class Var(Expr):
    name: str

    def eval(self, env):
        return float((env or {}).get(self.name, 0.0))

    def check(self, vars):
        vars.add(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Literal(Expr):
    value: float

    def eval(self, env):
        return float(self.value)

    def check(self, vars):
        return None


@dataclass(frozen=True)
class Unary(Expr):
    op: str
    x: Expr

    def eval(self, env):
        if self.op == "+":
            return +self.x.eval(env)
        if self.op == "-":
            return -self.x.eval(env)
        raise ExprError(f"unsupported unary operator: {_quote_rune(self.op)}")

    def check(self, vars):
        if self.op not in ("+", "-"):
            raise ExprError(f"unexpected unary op {_quote_rune(self.op)}")
        self.x.check(vars)


def _divide(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True)
class Binary(Expr):
    op: str
    x: Expr
    y: Expr

    def eval(self, env):
        a, b = self.x.eval(env), self.y.eval(env)
        if self.op == "+":
            return a + b
        if self.op == "-":
            return a - b
        if self.op == "*":
            return a * b
        if self.op == "/":
            return _divide(a, b)
        raise ExprError(f"unsupported binary operator: {_quote_rune(self.op)}")

    def check(self, vars):
        if self.op not in ("+", "-", "*", "/"):
            raise ExprError(f"unexpected binary op {_quote_rune(self.op)}")
        self.x.check(vars)
        self.y.check(vars)


def _pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except (ValueError, ZeroDivisionError):
        return math.nan


def _safe(fn, a: float) -> float:
    try:
        return fn(a)
    except ValueError:
        return math.nan


@dataclass(frozen=True)
class Call(Expr):
    fn: str
    args: tuple[Expr, ...]

    def eval(self, env):
        values = [arg.eval(env) for arg in self.args]
        if self.fn == "pow":
            return _pow(values[0], values[1])
        if self.fn == "sin":
            return _safe(math.sin, values[0])
        if self.fn == "sqrt":
            return _safe(math.sqrt, values[0])
        raise ExprError(f"unsupported function call: {self.fn}")

    def check(self, vars):
        arity = _NUM_PARAMS.get(self.fn)
        if arity is None:
            raise ExprError(f'unknown function "{self.fn}"')
        if len(self.args) != arity:
            raise ExprError(
                f"call to {self.fn} has {len(self.args)} args, want {arity}"
            )
        for arg in self.args:
            arg.check(vars)


# ---- lexer ----

_EOF = "EOF"
_IDENT = "IDENT"
_INT = "INT"
_FLOAT = "FLOAT"

_TOKEN_RE = re.compile(
    r"(?P<num>\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)"
    r"|(?P<ident>[^\W\d]\w*)"
    r"|(?P<ws>[ \t\r\n]+)"
    r"|(?P<other>.)",
    re.S,
)


def _scan(text: str) -> Iterator[tuple[str, str]]:
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        value = match.group()
        if kind == "ws":
            continue
        if kind == "num":
            is_float = any(c in value for c in ".eE")
            yield (_FLOAT if is_float else _INT), value
        elif kind == "ident":
            yield _IDENT, value
        else:
            yield value, value
    while True:
        yield _EOF, ""


class _Lexer:
    def __init__(self, text: str) -> None:
        self._tokens = _scan(text)
        self.token = _EOF
        self.text = ""
        self.next()

    def next(self) -> None:
        self.token, self.text = next(self._tokens)

    def describe(self) -> str:
        if self.token == _EOF:
            return "end of file"
        if self.token == _IDENT:
            return f"identifier {self.text}"
        if self.token in (_INT, _FLOAT):
            return f"number {self.text}"
        return _quote_rune(self.token)


def _precedence(op: str) -> int:
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


# ---- parser ----


def parse(text: str) -> Expr:
    """Parse text as an arithmetic expression, raising ExprError on failure."""
    lex = _Lexer(text)
    expr = _parse_expr(lex)
    if lex.token != _EOF:
        raise ExprError(f"unexpected {lex.describe()}")
    return expr


def _parse_expr(lex: _Lexer) -> Expr:
    return _parse_binary(lex, 1)


def _parse_binary(lex: _Lexer, prec1: int) -> Expr:
    lhs = _parse_unary(lex)
    prec = _precedence(lex.token)
    while prec >= prec1:
        while _precedence(lex.token) == prec:
            op = lex.token
            lex.next()
            rhs = _parse_binary(lex, prec + 1)
            lhs = Binary(op, lhs, rhs)
        prec -= 1
    return lhs


def _parse_unary(lex: _Lexer) -> Expr:
    if lex.token in ("+", "-"):
        op = lex.token
        lex.next()
        return Unary(op, _parse_unary(lex))
    return _parse_primary(lex)


def _expect_close(lex: _Lexer) -> None:
    if lex.token != ")":
        raise ExprError(f"got {lex.describe()}, want ')'")
    lex.next()


def _parse_primary(lex: _Lexer) -> Expr:
    if lex.token == _IDENT:
        name = lex.text
        lex.next()
        if lex.token != "(":
            return Var(name)
        lex.next()
        args: list[Expr] = []
        if lex.token != ")":
            args.append(_parse_expr(lex))
            while lex.token == ",":
                lex.next()
                args.append(_parse_expr(lex))
        _expect_close(lex)
        return Call(name, tuple(args))

    if lex.token in (_INT, _FLOAT):
        value = float(lex.text)
        if math.isinf(value):
            raise ExprError(f'parsing "{lex.text}": value out of range')
        lex.next()
        return Literal(value)

    if lex.token == "(":
        lex.next()
        expr = _parse_expr(lex)
        _expect_close(lex)
        return expr

    raise ExprError(f"unexpected {lex.describe()}")


# ---- printer ----


def format_expr(expr: Expr) -> str:
    """Format expr as a fully parenthesised string."""
    if isinstance(expr, Literal):
        return _format_g(expr.value)
    if isinstance(expr, Var):
        return expr.name
    if isinstance(expr, Unary):
        return f"({expr.op}{format_expr(expr.x)})"
    if isinstance(expr, Binary):
        return f"({format_expr(expr.x)} {expr.op} {format_expr(expr.y)})"
    if isinstance(expr, Call):
        args = ", ".join(format_expr(arg) for arg in expr.args)
        return f"{expr.fn}({args})"
    raise ExprError(f"unknown Expr: {type(expr).__name__}")