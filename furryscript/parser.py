"""
FurryScript Parser
==================
Recursive-descent parser that builds an Abstract Syntax Tree (AST)
from the token stream produced by the Lexer.

Binary expressions are parsed by precedence climbing:
  - ``+`` and ``-`` bind at precedence 1
  - ``*`` and ``/`` bind at precedence 2
  - unary ``-`` wraps a single primary expression only

The parser stops at the first error; no partial tree is returned.
"""
import logging
from dataclasses import dataclass, field

from .errors import ParseError
from .lexer import Token, TokenType

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────
#  AST Node Types
# ─────────────────────────────────────────────────────────────

@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    node_type: str = ""
    line: int = 0
    col: int = 0


@dataclass
class StringLiteralNode(ASTNode):
    value: str = ""

    def __post_init__(self):
        self.node_type = "StringLiteral"


@dataclass
class IntegerLiteralNode(ASTNode):
    value: int = 0

    def __post_init__(self):
        self.node_type = "IntegerLiteral"


@dataclass
class FloatLiteralNode(ASTNode):
    value: float = 0.0

    def __post_init__(self):
        self.node_type = "FloatLiteral"


@dataclass
class IdentifierNode(ASTNode):
    """A name used inside an expression."""
    name: str = ""

    def __post_init__(self):
        self.node_type = "Identifier"


@dataclass
class PrintNode(ASTNode):
    """purr(expression)"""
    argument: ASTNode | None = None

    def __post_init__(self):
        self.node_type = "Print"


@dataclass
class VariableDeclarationNode(ASTNode):
    """meow name = expression"""
    name: str = ""
    value: ASTNode | None = None

    def __post_init__(self):
        self.node_type = "VariableDeclaration"


@dataclass
class VariableAccessNode(ASTNode):
    """A bare name as a statement, or ``woof name``.

    Evaluating it only checks that the variable exists.
    """
    name: str = ""

    def __post_init__(self):
        self.node_type = "VariableAccess"


@dataclass
class FunctionDeclarationNode(ASTNode):
    """trick name(a, b) { statements }

    Recorded by the interpreter but never invoked.
    """
    name: str = ""
    parameters: list[IdentifierNode] = field(default_factory=list)
    body: list[ASTNode] = field(default_factory=list)

    def __post_init__(self):
        self.node_type = "FunctionDeclaration"


@dataclass
class FunctionCallNode(ASTNode):
    """name(arg1, arg2)"""
    name: str = ""
    arguments: list[ASTNode] = field(default_factory=list)

    def __post_init__(self):
        self.node_type = "FunctionCall"


@dataclass
class UnaryExpressionNode(ASTNode):
    operator: str = ""
    argument: ASTNode | None = None

    def __post_init__(self):
        self.node_type = "UnaryExpression"


@dataclass
class BinaryExpressionNode(ASTNode):
    operator: str = ""
    left: ASTNode | None = None
    right: ASTNode | None = None

    def __post_init__(self):
        self.node_type = "BinaryExpression"


@dataclass
class ProgramNode(ASTNode):
    """Root node containing all top-level statements."""
    statements: list[ASTNode] = field(default_factory=list)

    def __post_init__(self):
        self.node_type = "Program"


BINARY_PRECEDENCE = {
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.STAR: 2,
    TokenType.SLASH: 2,
}


# ─────────────────────────────────────────────────────────────
#  Parser
# ─────────────────────────────────────────────────────────────

class Parser:
    """
    Recursive-descent parser for FurryScript source.

    Usage:
        parser = Parser(tokens)
        ast = parser.parse()
    """

    def __init__(self, tokens: list[Token]):
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token list must end with an EOF token")
        self.tokens = tokens
        self.pos = 0

    def _current(self) -> Token:
        return self.tokens[self.pos]

    def _peek(self, offset: int = 1) -> Token:
        idx = self.pos + offset
        if idx >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[idx]

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return token

    def _expect(self, token_type: TokenType) -> Token:
        token = self._current()
        if token.type != token_type:
            raise ParseError(token_type.name, token.type.name, token.line, token.col)
        return self._advance()

    # ─────────────────────────────────────────────────────────
    #  Statements
    # ─────────────────────────────────────────────────────────

    def parse(self) -> ProgramNode:
        """Parse the token stream into a ProgramNode."""
        program = ProgramNode(line=1, col=1)
        while self._current().type != TokenType.EOF:
            start = self._current()
            try:
                program.statements.append(self._parse_statement())
            except RecursionError:
                raise ParseError(
                    "shallower nesting", f"{start.type.name} nested too deeply",
                    start.line, start.col,
                ) from None
        logger.debug("Parsed %d statements", len(program.statements))
        return program

    def _parse_statement(self) -> ASTNode:
        token = self._current()

        match token.type:
            case TokenType.PURR:
                return self._parse_print()
            case TokenType.MEOW:
                return self._parse_variable_declaration()
            case TokenType.TRICK:
                return self._parse_function_declaration()
            case TokenType.WOOF:
                return self._parse_woof()
            case TokenType.IDENTIFIER:
                if self._peek().type == TokenType.LPAREN:
                    return self._parse_function_call()
                self._advance()
                return VariableAccessNode(name=token.value, line=token.line, col=token.col)
            case _:
                return self._parse_expression()

    def _parse_print(self) -> PrintNode:
        """Parse: purr ( expression )"""
        token = self._expect(TokenType.PURR)
        self._expect(TokenType.LPAREN)
        argument = self._parse_expression()
        self._expect(TokenType.RPAREN)
        return PrintNode(argument=argument, line=token.line, col=token.col)

    def _parse_variable_declaration(self) -> VariableDeclarationNode:
        """Parse: meow name = expression"""
        token = self._expect(TokenType.MEOW)
        name = self._expect(TokenType.IDENTIFIER).value
        self._expect(TokenType.EQUALS)
        value = self._parse_expression()
        return VariableDeclarationNode(name=name, value=value, line=token.line, col=token.col)

    def _parse_woof(self) -> VariableAccessNode:
        """Parse: woof name"""
        token = self._expect(TokenType.WOOF)
        name = self._expect(TokenType.IDENTIFIER).value
        return VariableAccessNode(name=name, line=token.line, col=token.col)

    def _parse_function_declaration(self) -> FunctionDeclarationNode:
        """Parse: trick name ( params ) { statements }"""
        token = self._expect(TokenType.TRICK)
        name = self._expect(TokenType.IDENTIFIER).value
        self._expect(TokenType.LPAREN)

        parameters = []
        while self._current().type != TokenType.RPAREN:
            param = self._expect(TokenType.IDENTIFIER)
            parameters.append(IdentifierNode(name=param.value, line=param.line, col=param.col))
            if self._current().type == TokenType.COMMA:
                self._advance()
        self._expect(TokenType.RPAREN)

        self._expect(TokenType.LBRACE)
        body = []
        while self._current().type not in (TokenType.RBRACE, TokenType.EOF):
            body.append(self._parse_statement())
        self._expect(TokenType.RBRACE)

        return FunctionDeclarationNode(
            name=name, parameters=parameters, body=body,
            line=token.line, col=token.col,
        )

    def _parse_function_call(self) -> FunctionCallNode:
        """Parse: name ( args )"""
        token = self._expect(TokenType.IDENTIFIER)
        self._expect(TokenType.LPAREN)

        arguments = []
        while self._current().type not in (TokenType.RPAREN, TokenType.EOF):
            arguments.append(self._parse_expression())
            if self._current().type == TokenType.COMMA:
                self._advance()
        self._expect(TokenType.RPAREN)

        return FunctionCallNode(name=token.value, arguments=arguments, line=token.line, col=token.col)

    # ─────────────────────────────────────────────────────────
    #  Expressions
    # ─────────────────────────────────────────────────────────

    def _parse_expression(self) -> ASTNode:
        return self._parse_binary(0)

    def _parse_binary(self, min_precedence: int) -> ASTNode:
        """Precedence climbing: only consume operators that bind tighter than ``min_precedence``."""
        left = self._parse_primary()

        while True:
            op_token = self._current()
            precedence = BINARY_PRECEDENCE.get(op_token.type, 0)
            if precedence <= min_precedence:
                break
            self._advance()
            right = self._parse_binary(precedence)
            left = BinaryExpressionNode(
                operator=op_token.value, left=left, right=right,
                line=op_token.line, col=op_token.col,
            )

        return left

    def _parse_primary(self) -> ASTNode:
        token = self._current()

        match token.type:
            case TokenType.MINUS:
                self._advance()
                argument = self._parse_primary()
                return UnaryExpressionNode(
                    operator=token.value, argument=argument,
                    line=token.line, col=token.col,
                )
            case TokenType.INTEGER:
                try:
                    value = int(token.value)
                except ValueError:
                    # Past sys.get_int_max_str_digits()
                    raise ParseError(
                        "integer literal within the digit limit",
                        f"INTEGER of {len(token.value)} digits",
                        token.line, token.col,
                    ) from None
                self._advance()
                return IntegerLiteralNode(value=value, line=token.line, col=token.col)
            case TokenType.FLOAT:
                self._advance()
                return FloatLiteralNode(value=float(token.value), line=token.line, col=token.col)
            case TokenType.STRING:
                self._advance()
                return StringLiteralNode(value=token.value, line=token.line, col=token.col)
            case TokenType.IDENTIFIER:
                if self._peek().type == TokenType.LPAREN:
                    return self._parse_function_call()
                self._advance()
                return IdentifierNode(name=token.value, line=token.line, col=token.col)
            case TokenType.WOOF:
                return self._parse_woof()
            case TokenType.LPAREN:
                self._advance()  # consume (
                inner = self._parse_expression()
                self._expect(TokenType.RPAREN)
                return inner
            case _:
                raise ParseError("expression", token.type.name, token.line, token.col)


def parse(tokens: list[Token]) -> ProgramNode:
    """Parse ``tokens`` with a fresh Parser."""
    return Parser(tokens).parse()
