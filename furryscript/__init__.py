# FurryScript: a tiny cat-themed scripting language
"""
FurryScript: lexer, recursive-descent parser, and tree-walking interpreter.
"""
from .errors import (
    FurryScriptError, LexError, ParseError, ScriptRuntimeError, RuntimeErrorKind,
)
from .lexer import Lexer, Token, TokenType, tokenize
from .parser import (
    Parser, ASTNode, ProgramNode, StringLiteralNode, IntegerLiteralNode,
    FloatLiteralNode, IdentifierNode, PrintNode, VariableDeclarationNode,
    VariableAccessNode, FunctionDeclarationNode, FunctionCallNode,
    UnaryExpressionNode, BinaryExpressionNode, parse,
)
from .interpreter import Environment, Interpreter, interpret
from .config import RunConfig
from .runner import run_source, run_file

__version__ = "0.1.0"
__all__ = [
    "FurryScriptError", "LexError", "ParseError", "ScriptRuntimeError", "RuntimeErrorKind",
    "Lexer", "Token", "TokenType", "tokenize",
    "Parser", "ASTNode", "ProgramNode", "StringLiteralNode", "IntegerLiteralNode",
    "FloatLiteralNode", "IdentifierNode", "PrintNode", "VariableDeclarationNode",
    "VariableAccessNode", "FunctionDeclarationNode", "FunctionCallNode",
    "UnaryExpressionNode", "BinaryExpressionNode", "parse",
    "Environment", "Interpreter", "interpret",
    "RunConfig", "run_source", "run_file",
]
