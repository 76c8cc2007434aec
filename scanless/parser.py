# Copyright © 2009/2023 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this
# software and associated documentation files (the "Software"), to deal in the Software
# without restriction, including without limitation the rights to use, copy, modify,
# merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be included in all copies
# or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
# INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
# PARTICULAR PURPOSE AND NON-INFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Scannerless parsing combinators.

Parsing combinators define an internal domain-specific language (DSL) for describing
the parsing rules of a grammar. You start with a few primitive parsers that look at
the characters of the input string directly, combine them into more complex
parsers, and finally cover the whole grammar you want to parse. There is no separate
tokenization pass: every parser works on the remaining slice of the input.

The structure of the language:

* Parsers
    * A parser is anything callable as `p(text)` that returns a `ParseResult`
      (see `ParserLike`)
    * All the primitives and combinators of the language return `Parser` objects
    * `Parser.parse(text)` runs a parser at the top level and raises `NoParseError`
      on failure
* Parsing results
    * `Success(rest, value)` and `Failure(rest, message)`
* Primitive parsers
    * `parse_literal(lit)`, `parse_literals(lits)`, `parse_tok_with_rule(rule)`,
      `parse_number()`, `parse_identifier()`, `end_of_input`
* Parser combinators
    * `and_(p1, p2)` (`p1 + p2`), `or_(p1, p2)` (`p1 | p2`), `map_(p, f)` (`p >> f`),
      `option(p)`, `zero_or_more(p)`, `one_or_more(p)`, `prefix(lit, p)`,
      `suffix(lit, p)`, `surround(open, close, p)`
* Abstraction
    * Use regular Python variables `p = ...  # Expression of type Parser` to define new
      rules (non-terminals) of your grammar, and `forward_decl()` for recursive ones

Only `or_()` and `option()` backtrack: they retry from the original input when their
first attempt fails. Sequencing and repetition commit as they go, so a `Failure`
carries the remaining input at the point where parsing actually gave up.

Inside a grammar the parsers pass around the whole input and an offset into it, the
way a cursor moves over a string. The `rest` strings of `Success` and `Failure` are
only cut out for the result handed back to the caller, so parsing stays linear in
the length of the input.
"""

__all__ = [
    "parse_literal",
    "parse_literals",
    "parse_tok_with_rule",
    "parse_number",
    "parse_identifier",
    "end_of_input",
    "option",
    "and_",
    "or_",
    "zero_or_more",
    "one_or_more",
    "prefix",
    "suffix",
    "surround",
    "map_",
    "forward_decl",
    "Parser",
    "ParserLike",
    "NoParseError",
    "ParseResult",
    "Success",
    "Failure",
]


import dataclasses as dc
import logging
import string
import sys
from collections.abc import Iterator, Iterable, Sequence
from typing import (
    Any,
    Callable,
    Generic,
    Optional,
    TypeVar,
    Protocol,
    Union,
    final,
)

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from scanless.keywords import is_keyword

log = logging.getLogger("scanless")

debug = False

_A = TypeVar("_A")
_B = TypeVar("_B")
_C = TypeVar("_C")
_T = TypeVar("_T")

# Parsing result value
_R = TypeVar("_R", covariant=True)

# How much of the remaining input to show in error messages
_EXCERPT_LEN = 20


_DC_KWARGS: dict[str, bool] = {
    # Frozen objects have performance impact, so keep it only for type checking
    # "frozen": True,
}
if sys.version_info >= (3, 10):
    _DC_KWARGS["slots"] = True


class NoParseError(Exception):
    def __init__(self, msg: str, rest: str) -> None:
        self.msg = msg
        self.rest = rest

    def __str__(self) -> str:
        return self.msg


class ParseResult(Protocol[_R], Iterable):
    """Result monad for parsing combinators.

    Immutable (objects' data should not be changed after creation).

    `rest` is the part of the input that is left after the parser stopped: the
    unconsumed suffix for `Success`, the input at the point of giving up for `Failure`.
    """

    rest: str

    def map(self, f: Callable[[_R], _C]) -> "ParseResult[_C]":
        ...

    def bind(self, f: Callable[[_R, str], "ParseResult[_C]"]) -> "ParseResult[_C]":
        ...


@final
@dc.dataclass(**_DC_KWARGS)
class Success(ParseResult[_R]):
    rest: str
    value: _R

    def __iter__(self) -> Iterator:
        yield self.value
        yield self.rest

    def __bool__(self) -> bool:
        return True

    def map(self, f: Callable[[_R], _C]) -> ParseResult[_C]:
        return Success(self.rest, f(self.value))

    def bind(self, f: Callable[[_R, str], ParseResult[_C]]) -> ParseResult[_C]:
        return f(self.value, self.rest)


@final
@dc.dataclass(**_DC_KWARGS)
class Failure(ParseResult[_R]):
    rest: str
    message: str = "got unexpected input"

    @property
    def _error(self) -> NoParseError:
        return NoParseError(self.message, self.rest)

    @property
    def value(self) -> _R:
        raise self._error

    def __iter__(self) -> Iterator:
        raise self._error

    def __bool__(self) -> bool:
        return False

    def map(self, f: Callable[[_R], _C]) -> ParseResult[_C]:
        return self  # type: ignore

    def bind(self, f: Callable[[_R, str], ParseResult[_C]]) -> ParseResult[_C]:
        return self  # type: ignore


class ParserLike(Protocol[_R]):
    """Anything that can be called with the input text and returns a `ParseResult`.

    Plain functions qualify as well as `Parser` objects, so every combinator accepts
    both.
    """

    def __call__(self, text: str) -> ParseResult[_R]:
        ...


# Offset-based results of `Parser.run`: `pos` is where the parser stopped in the
# whole input. Converted into `Success` / `Failure` by `_to_result()`.


@final
@dc.dataclass(**_DC_KWARGS)
class _Matched(Generic[_R]):
    pos: int
    value: _R


@final
@dc.dataclass(**_DC_KWARGS)
class _Failed:
    pos: int
    message: str


_Step = Union[_Matched[_T], _Failed]
_RunFn = Callable[[str, int], _Step[_T]]


def _to_result(text: str, step: _Step[_T]) -> ParseResult[_T]:
    if isinstance(step, _Matched):
        return Success(text[step.pos :], step.value)
    return Failure(text[step.pos :], step.message)


def _run_at_offset(p: ParserLike[_T]) -> _RunFn[_T]:
    def run(text: str, pos: int) -> _Step[_T]:
        res = p(text[pos:])
        end = len(text) - len(res.rest)
        if isinstance(res, Success):
            return _Matched(end, res.value)
        return _Failed(end, getattr(res, "message", "got unexpected input"))

    return run


def _name_of(p: Any) -> str:
    if (name := getattr(p, "name", None)) is not None:
        return name
    return getattr(p, "__name__", repr(p))


@final
@dc.dataclass(frozen=True, init=False, **_DC_KWARGS)
class Parser(Generic[_T]):
    """A parser object that can parse a string or can be combined with other parsers
    using `+`, `|`, `>>`, `zero_or_more()`, and other parsing combinators.

    Type: `Parser[T]`, where `T` is the type of the parsed value.

    In order to define a parser for your grammar:

    1. You start with primitive parsers by calling `parse_literal(lit)`,
       `parse_tok_with_rule(rule)`, `parse_number()`, `parse_identifier()`,
       `forward_decl()`
    2. You use parsing combinators `p1 + p2`, `p1 | p2`, `p >> f`, `zero_or_more(p)`,
       and others to combine parsers into a more complex parser
    3. You can assign complex parsers to variables to define names that correspond to
       the rules of your grammar

    A `Parser` object is a `ParserLike` itself: calling `p(text)` returns the
    `ParseResult` instead of raising an exception.

    !!! Note

        The constructor `Parser.__init__()` is considered **internal** and may be
        changed in future versions. Use primitive parsers and parsing combinators to
        construct new parsers.
    """

    run: _RunFn[_T]
    """Run the parser against the text, starting at the offset `pos`.

    Type: `(str, int) -> _Matched[T] | _Failed`

    The parsers of a grammar pass the whole input and an offset to each other, so no
    part of the input is copied while parsing.

    !!! Warning

        This method is **internal** and may be changed in future versions. Use
        `p(text)` or `Parser.parse(text)` instead.
    """

    name: str = dc.field(compare=False)

    def __init__(self, p: ParserLike[_T]) -> None:
        """Wrap the parser function `p` into a `Parser` object."""
        self.define(p)

    @classmethod
    def _from_run(cls, f: _RunFn[_T], name: str) -> "Parser[_T]":
        self = cls.__new__(cls)
        self._define_run(f)
        return self.named(name)

    def __call__(self, text: str) -> ParseResult[_T]:
        return _to_result(text, self.run(text, 0))

    def named(self, name: str) -> Self:
        """Specify the name of the parser for easier debugging.

        Type: `(str) -> Parser[T]`

        This name is used in the debug-level parsing log. You can also get it via the
        `Parser.name` attribute.

        Examples:

        ```pycon
        >>> expr = (parse_literal("x") + parse_literal("y")).named("expr")
        >>> expr.name
        'expr'

        ```

        ```pycon
        >>> expr = parse_literal("x") + parse_literal("y")
        >>> expr.name
        "('x', 'y')"

        ```

        !!! Note

            You can enable the parsing log this way:

            ```python
            import logging
            logging.basicConfig(level=logging.DEBUG)
            import scanless.parser
            scanless.parser.debug = True
            ```

            Only the parsers created after setting `debug` are logged.
        """
        object.__setattr__(self, "name", name)
        return self

    def _named_from(self, p: ParserLike[_T]) -> Self:
        return self.named(_name_of(p))

    def define(self, p: ParserLike[_T]) -> None:
        """Define the parser created earlier as a forward declaration.

        Type: `(Parser[T]) -> None`

        Use `p = forward_decl()` in combination with `p.define(...)` to define
        recursive parsers.

        See the examples in the docs for `forward_decl()`.
        """
        self._define_run(p.run if isinstance(p, Parser) else _run_at_offset(p))
        self._named_from(p)

    def _define_run(self, f: _RunFn[_T]) -> None:
        object.__setattr__(self, "run", self._wrap_for_debug(f) if debug else f)

    def _wrap_for_debug(self, f: _RunFn[_T]) -> _RunFn[_T]:
        def run_parser_verbose(text: str, pos: int) -> _Step[_T]:
            log.debug("trying %s" % self.name)
            return f(text, pos)

        return run_parser_verbose

    def parse(self, text: str) -> _T:
        """Parse the text and return the parsed value.

        Type: `(str) -> T`

        If the parser fails to parse the text, it raises `NoParseError`. The error
        message contains the offset of the failure in `text`. The parser doesn't have
        to consume the whole text, use `end_of_input` for that.

        Examples:

        ```pycon
        >>> parse_number().parse("42")
        42.0

        ```

        ```pycon
        >>> expr = parse_literal("x") + parse_literal("y")
        >>> expr.parse("xz")
        Traceback (most recent call last):
            ...
        scanless.parser.NoParseError: literal 'y' not found at offset 1: 'z'

        ```
        """
        try:
            (value, _) = self(text)
            return value
        except NoParseError as e:
            _format_parsing_error(e, text)
            raise

    def __add__(self, other: ParserLike[_C]) -> "Parser[tuple[_T, _C]]":
        """Sequential combination of parsers, the same as `and_(self, other)`.

        Type: `(Parser[A], Parser[B]) -> Parser[tuple[A, B]]`

        Unlike tuples, the pairs don't flatten: `p1 + p2 + p3` parses into
        `((v1, v2), v3)`.

        Examples:

        ```pycon
        >>> expr = parse_literal("x") + parse_literal("y")
        >>> expr.parse("xy")
        ('x', 'y')

        ```
        """
        return and_(self, other)

    def __or__(self, other: ParserLike[_C]) -> "Parser[Any]":
        """Choice combination of parsers, the same as `or_(self, other)`.

        Examples:

        ```pycon
        >>> expr = parse_literal("x") | parse_literal("y")
        >>> expr.parse("y")
        'y'

        ```
        """
        return or_(self, other)

    def __rshift__(self, f: Callable[[_T], _C]) -> "Parser[_C]":
        """Transform the parsing result by applying the specified function, the same
        as `map_(self, f)`.

        Examples:

        ```pycon
        >>> expr = (parse_literal("D") | parse_literal("d")) >> str.lower
        >>> expr.parse("D")
        'd'

        ```
        """
        return map_(self, f)


def parser(name: str) -> Callable[[_RunFn[_T]], Parser[_T]]:
    """Decorator to create named parsers directly from run functions."""

    def _parser(f: _RunFn[_T]) -> Parser[_T]:
        return Parser._from_run(f, name)

    return _parser


def _as_parser(p: ParserLike[_T]) -> Parser[_T]:
    # Parser objects are kept as is, so a forward_decl() defined later is seen
    if isinstance(p, Parser):
        return p
    return Parser(p)


def _format_parsing_error(e: NoParseError, text: str) -> None:
    pos = len(text) - len(e.rest)
    if not e.rest:
        got = "end of input"
    else:
        got = repr(e.rest[:_EXCERPT_LEN])
    e.msg = f"{e.msg} at offset {pos}: {got}"


def _excerpt(text: str, pos: int) -> str:
    return text[pos : pos + _EXCERPT_LEN]


def _log_failed(name: str, text: str, pos: int) -> None:
    log.debug("failed %r, expected: %s" % (_excerpt(text, pos), name))


# Combinators


def option(p: ParserLike[_A]) -> Parser[Optional[_A]]:
    """Return a parser that returns `None` if the parser `p` fails.

    On failure no input is consumed: the result is a `Success` with the original text
    as its rest.

    Examples:

    ```pycon
    >>> expr = option(parse_literal("x"))
    >>> expr("xy")
    Success(rest='y', value='x')
    >>> expr("yz")
    Success(rest='yz', value=None)

    ```
    """
    p = _as_parser(p)

    @parser("[ %s ]" % p.name)
    def _option(text: str, pos: int) -> _Step[Optional[_A]]:
        res = p.run(text, pos)
        if isinstance(res, _Matched):
            return res
        return _Matched(pos, None)

    return _option


def and_(pa: ParserLike[_A], pb: ParserLike[_B]) -> Parser[tuple[_A, _B]]:
    """Return a parser that runs `pa`, then runs `pb` on the rest, and pairs their
    values.

    If either parser fails, its `Failure` is returned as is. Whatever `pa` has
    consumed is not given back.

    Examples:

    ```pycon
    >>> expr = and_(parse_literal("x"), parse_literal("y"))
    >>> expr("xyz")
    Success(rest='z', value=('x', 'y'))
    >>> expr("xz")
    Failure(rest='z', message="literal 'y' not found")

    ```
    """
    pa, pb = _as_parser(pa), _as_parser(pb)

    @parser("(%s, %s)" % (pa.name, pb.name))
    def _and(text: str, pos: int) -> _Step[tuple[_A, _B]]:
        res_a = pa.run(text, pos)
        if not isinstance(res_a, _Matched):
            return res_a
        res_b = pb.run(text, res_a.pos)
        if not isinstance(res_b, _Matched):
            return res_b
        return _Matched(res_b.pos, (res_a.value, res_b.value))

    return _and


def or_(p1: ParserLike[_A], p2: ParserLike[_B]) -> Parser[Any]:
    """Choice combination of parsers.

    It runs `p1` and returns its result. If `p1` fails, it runs `p2` on the same
    original text. If both fail, the `Failure` of `p2` is returned.

    Examples:

    ```pycon
    >>> expr = or_(parse_literal("if"), parse_literal("eval"))
    >>> expr("eval x")
    Success(rest=' x', value='eval')

    ```
    """
    p1, p2 = _as_parser(p1), _as_parser(p2)

    @parser(f"{p1.name} or {p2.name}")
    def _or(text: str, pos: int) -> _Step[Any]:
        res: _Step[Any] = p1.run(text, pos)
        if isinstance(res, _Matched):
            return res
        return p2.run(text, pos)

    return _or


def _repeat(p: Parser[_A], text: str, pos: int) -> tuple[list[_A], int]:
    acc = []
    while True:
        res = p.run(text, pos)
        if not isinstance(res, _Matched):
            break
        acc.append(res.value)
        # A match that consumes nothing would match again forever
        if res.pos <= pos:
            break
        pos = res.pos
    return acc, pos


def zero_or_more(p: ParserLike[_A]) -> Parser[list[_A]]:
    """Return a parser that applies the parser `p` as many times as it succeeds at
    parsing the text.

    The parsed value is a list of the sequentially parsed values. The parser never
    fails. Repetition stops after a match of `p` that consumes nothing, that match
    is the last item of the list.

    Examples:

    ```pycon
    >>> expr = zero_or_more(parse_literal("x"))
    >>> expr.parse("xxxy")
    ['x', 'x', 'x']
    >>> expr.parse("y")
    []

    ```
    """
    p = _as_parser(p)

    @parser("{ %s }" % p.name)
    def _zero_or_more(text: str, pos: int) -> _Step[list[_A]]:
        acc, end = _repeat(p, text, pos)
        if debug:
            log.debug(
                f"*matched* {len(acc)} instances of {_zero_or_more.name}, "
                f"rest = {_excerpt(text, end)!r}"
            )
        return _Matched(end, acc)

    return _zero_or_more


def one_or_more(p: ParserLike[_A]) -> Parser[list[_A]]:
    """Return a parser that applies the parser `p` one or more times.

    A similar parser combinator `zero_or_more(p)` means apply `p` zero or more times,
    whereas `one_or_more(p)` means apply `p` one or more times.

    Examples:

    ```pycon
    >>> expr = one_or_more(parse_literal("ab"))
    >>> expr("ababab_")
    Success(rest='_', value=['ab', 'ab', 'ab'])
    >>> expr("ba")
    Failure(rest='ba', message="no instances of 'ab' found")

    ```
    """
    p = _as_parser(p)
    name = p.name

    @parser("(%s, { %s })" % (name, name))
    def _one_or_more(text: str, pos: int) -> _Step[list[_A]]:
        acc, end = _repeat(p, text, pos)
        if debug:
            log.debug(
                f"*matched* {len(acc)} instances of {_one_or_more.name}, "
                f"rest = {_excerpt(text, end)!r}"
            )
        if not acc:
            return _Failed(pos, f"no instances of {name} found")
        return _Matched(end, acc)

    return _one_or_more


def map_(p: ParserLike[_A], f: Callable[[_A], _B]) -> Parser[_B]:
    """Transform the parsing result of `p` by applying the function `f`.

    Type: `(Parser[A], Callable[[A], B]) -> Parser[B]`

    You can use it for transforming the parsed value into another value, e.g. a
    matched literal into an enum member. A failure of `p` is returned unchanged.

    Examples:

    ```pycon
    >>> expr = map_(parse_literal("42"), int)
    >>> expr.parse("42")
    42

    ```
    """
    p = _as_parser(p)

    @parser(p.name)
    def _map(text: str, pos: int) -> _Step[_B]:
        res = p.run(text, pos)
        if isinstance(res, _Matched):
            return _Matched(res.pos, f(res.value))
        return res

    return _map


def prefix(lit: str, p: ParserLike[_T]) -> Parser[_T]:
    """Return a parser that matches the literal `lit`, drops it, then runs `p`.

    Examples:

    ```pycon
    >>> expr = prefix("-", parse_number())
    >>> expr("-2.5;")
    Success(rest=';', value=2.5)

    ```
    """
    return map_(and_(parse_literal(lit), p), lambda v: v[1]).named(
        "(%r, %s)" % (lit, _name_of(p))
    )


def suffix(lit: str, p: ParserLike[_T]) -> Parser[_T]:
    """Return a parser that runs `p`, then matches the literal `lit` and drops it.

    Examples:

    ```pycon
    >>> expr = suffix(";", parse_identifier())
    >>> expr("x; y")
    Success(rest=' y', value='x')

    ```
    """
    return map_(and_(p, parse_literal(lit)), lambda v: v[0]).named(
        "(%s, %r)" % (_name_of(p), lit)
    )


def surround(open: str, close: str, p: ParserLike[_T]) -> Parser[_T]:
    """Return a parser for `p` enclosed in the `open` and `close` literals.

    Only the value of `p` is returned.

    Examples:

    ```pycon
    >>> expr = surround("(", ")", parse_number())
    >>> expr("(1.5) + 2")
    Success(rest=' + 2', value=1.5)

    ```
    """
    return prefix(open, suffix(close, p))


def forward_decl() -> Parser[Any]:
    """Return an undefined parser that can be used as a forward declaration.

    Type: `Parser[Any]`

    Use `p = forward_decl()` in combination with `p.define(...)` to define recursive
    parsers.

    Examples:

    ```pycon
    >>> expr = forward_decl()
    >>> expr.define(or_(surround("(", ")", expr), parse_number()))
    >>> expr.parse("((7))")
    7.0

    ```

    !!! Note

        If you care about static types, you should add a type hint for your forward
        declaration, so that your type checker can check types in `p.define(...)` later:

        ```python
        p: Parser[float] = forward_decl()
        p.define(parse_literal("x"))  # Type checker error
        p.define(parse_number())  # OK
        ```
    """

    @parser("forward_decl()")
    def f(_text: Any, _pos: Any) -> Any:
        raise NotImplementedError("you must define() a forward_decl somewhere")

    return f


# Primitive parsers


def parse_literal(lit: str) -> Parser[str]:
    """Return a parser that matches the input prefix exactly equal to `lit`.

    Type: `(str) -> Parser[str]`

    The parsed value is `lit` itself. On failure no input is consumed.

    Examples:

    ```pycon
    >>> expr = parse_literal("if")
    >>> expr("if x")
    Success(rest=' x', value='if')
    >>> expr("of x")
    Failure(rest='of x', message="literal 'if' not found")

    ```
    """

    @parser(repr(lit))
    def _literal(text: str, pos: int) -> _Step[str]:
        if text.startswith(lit, pos):
            return _Matched(pos + len(lit), lit)
        return _Failed(pos, f"literal {lit!r} not found")

    return _literal


def parse_literals(lits: Sequence[str]) -> Parser[str]:
    """Return a parser that matches the first literal of `lits` the input starts
    with.

    Type: `(Sequence[str]) -> Parser[str]`

    The literals are tried in the given order and the first match wins, so put longer
    literals before their prefixes (`"<="` before `"<"`).

    Examples:

    ```pycon
    >>> expr = parse_literals(["<=", "<"])
    >>> expr("<=1")
    Success(rest='1', value='<=')
    >>> expr("<1")
    Success(rest='1', value='<')

    ```
    """
    lits = tuple(lits)
    name = " or ".join(repr(lit) for lit in lits)

    @parser(name)
    def _literals(text: str, pos: int) -> _Step[str]:
        for lit in lits:
            if text.startswith(lit, pos):
                return _Matched(pos + len(lit), lit)
        return _Failed(pos, f"none of {name} found")

    return _literals


def parse_tok_with_rule(rule: Callable[[str], bool]) -> Parser[str]:
    """Return a parser for a non-empty run of characters that satisfy `rule`.

    Type: `(Callable[[str], bool]) -> Parser[str]`

    The first character must satisfy the predicate `rule`, then the characters are
    consumed greedily while they satisfy it. The parser fails on the empty input, so it
    never returns an empty token.

    Examples:

    ```pycon
    >>> expr = parse_tok_with_rule(str.isalpha)
    >>> expr("abc123")
    Success(rest='123', value='abc')
    >>> bool(expr("123"))
    False

    ```
    """
    name = _name_of(rule)

    @parser(f"token({name})")
    def _tok(text: str, pos: int) -> _Step[str]:
        if pos >= len(text):
            if debug:
                _log_failed(_tok.name, text, pos)
            return _Failed(pos, "got unexpected end of input")
        if not rule(text[pos]):
            if debug:
                _log_failed(_tok.name, text, pos)
            return _Failed(pos, f"got unexpected character, expected: {name}")

        end = pos + 1
        while end < len(text) and rule(text[end]):
            end += 1
        tok = text[pos:end]
        if debug:
            log.debug("*matched* %r, rest = %r" % (tok, _excerpt(text, end)))
        return _Matched(end, tok)

    return _tok


def _is_number_char(c: str) -> bool:
    return c in string.digits or c == "."


def _is_identifier_char(c: str) -> bool:
    return c.isalnum() or c == "_"


def parse_number() -> Parser[float]:
    """Return a parser for a number made of ASCII digits and dots.

    Type: `() -> Parser[float]`

    The token is scanned first and then converted by `float()`. A token that doesn't
    convert fails with the rest positioned after the token.

    Examples:

    ```pycon
    >>> expr = parse_number()
    >>> expr("3.14abc")
    Success(rest='abc', value=3.14)
    >>> expr("1.2.3+")
    Failure(rest='+', message="could not parse '1.2.3' into a number")

    ```
    """
    tok = parse_tok_with_rule(_is_number_char)

    @parser("number")
    def _number(text: str, pos: int) -> _Step[float]:
        res = tok.run(text, pos)
        if not isinstance(res, _Matched):
            return res
        try:
            return _Matched(res.pos, float(res.value))
        except ValueError:
            return _Failed(res.pos, f"could not parse {res.value!r} into a number")

    return _number


def parse_identifier() -> Parser[str]:
    """Return a parser for an identifier.

    Type: `() -> Parser[str]`

    An identifier is a run of alphanumeric characters and underscores that doesn't
    start with a digit and isn't one of the reserved `scanless.keywords.KEYWORDS`. The
    run is scanned first, both checks are made afterwards, so a rejected token is
    still consumed in the `Failure`.

    Examples:

    ```pycon
    >>> expr = parse_identifier()
    >>> expr("true123 + 1")
    Success(rest=' + 1', value='true123')
    >>> expr("true)")
    Failure(rest=')', message="keyword 'true' cannot be used as an identifier")
    >>> expr("1abc")
    Failure(rest='', message="identifier cannot start with a digit: '1abc'")

    ```
    """
    tok = parse_tok_with_rule(_is_identifier_char)

    @parser("identifier")
    def _identifier(text: str, pos: int) -> _Step[str]:
        res = tok.run(text, pos)
        if isinstance(res, _Matched):
            if res.value[0] in string.digits:
                return _Failed(
                    res.pos, f"identifier cannot start with a digit: {res.value!r}"
                )
            if is_keyword(res.value):
                return _Failed(
                    res.pos, f"keyword {res.value!r} cannot be used as an identifier"
                )
        return res

    return _identifier


@parser("end of input")
def end_of_input(text: str, pos: int) -> _Step[None]:
    """A parser that fails if there is any unparsed text left."""
    if pos >= len(text):
        return _Matched(pos, None)
    return _Failed(pos, "expected end of input")


if __name__ == "__main__":
    import doctest

    doctest.testmod()
