# Copyright 2026 ModuleMap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for module map files.

Converts the token stream produced by the lexer into a ModuleMapFile syntax tree.
A syntax error abandons only the top-level module declaration it occurs in: the
parser records the error, skips ahead to the next token that can start a module
declaration, and carries on, so one pass reports every independent error.
"""

import logging

from modulemap.model.entities import (
    INT64_MAX,
    ConfigMacrosDeclaration,
    ConflictDeclaration,
    ExcludeHeader,
    ExportAsDeclaration,
    ExportDeclaration,
    ExternModuleDeclaration,
    Feature,
    HeaderAttribute,
    HeaderDeclaration,
    HeaderKind,
    InferredSubmoduleDeclaration,
    InferredSubmoduleMember,
    LinkDeclaration,
    LocalModuleDeclaration,
    ModuleDeclaration,
    ModuleMapFile,
    ModuleMember,
    RequiresDeclaration,
    StandardHeader,
    SubmoduleDeclaration,
    TextualHeader,
    UmbrellaDirectoryDeclaration,
    UmbrellaHeader,
    UseDeclaration,
)
from modulemap.model.identifiers import ModuleId, WildcardModuleId
from modulemap.parser.errors import (
    FailedToMakeIntegerFromLexeme,
    Located,
    ModuleMapParseError,
    ParseError,
    UnexpectedToken,
)
from modulemap.parser.lexer import scan_all_tokens
from modulemap.parser.tokens import Token, TokenType

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(text: str) -> ModuleMapFile:
    """Parse module map source text into a ModuleMapFile syntax tree.

    Args:
        text: The full text of a module map file.

    Returns:
        A ModuleMapFile holding every top-level module declaration in order.

    Raises:
        ModuleMapParseError: If the source contains any lexical or syntax error.
            The exception lists all errors found, not just the first one.
    """
    tokens, errors = scan_all_tokens(text)
    return _Parser(tokens, errors).parse()


# ################
# Implementation
# ################

# Prefixes that start a nested module declaration. Each ends with 'module'.
_SUBMODULE_PREFIXES: tuple[tuple[TokenType, ...], ...] = (
    (TokenType.EXPLICIT, TokenType.FRAMEWORK, TokenType.MODULE),
    (TokenType.EXPLICIT, TokenType.MODULE),
    (TokenType.FRAMEWORK, TokenType.MODULE),
    (TokenType.EXTERN, TokenType.MODULE),
    (TokenType.MODULE,),
)

_HEADER_STARTS: frozenset[TokenType] = frozenset(
    {
        TokenType.PRIVATE,
        TokenType.TEXTUAL,
        TokenType.HEADER,
        TokenType.EXCLUDE,
    }
)

_SYNC_TOKENS: frozenset[TokenType] = frozenset(
    {
        TokenType.EXPLICIT,
        TokenType.MODULE,
        TokenType.EXTERN,
    }
)


class _DeclarationError(Exception):
    """Abandons the declaration being parsed; caught by the top-level loop."""

    def __init__(self, error: Located[ParseError]) -> None:
        super().__init__(str(error))
        self.error = error


class _Parser:
    """Recursive-descent parser for module map token streams."""

    def __init__(self, tokens: list[Token], errors: list[Located[ParseError]]) -> None:
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("The token stream must be terminated by an EOF token")
        self._tokens = tokens
        self._pos = 0
        self._errors = list(errors)

    def parse(self) -> ModuleMapFile:
        """Parse the full token stream and return a ModuleMapFile."""
        declarations: list[ModuleDeclaration] = []
        while not self._at_end():
            try:
                declarations.append(self._parse_module_declaration())
            except _DeclarationError as exc:
                logger.debug("Recovering from syntax error: %s", exc.error)
                self._errors.append(exc.error)
                self._synchronize()

        if self._errors:
            logger.debug("Parse failed with %d error(s)", len(self._errors))
            raise ModuleMapParseError(self._errors)
        return ModuleMapFile(module_declarations=declarations)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _peek(self, offset: int) -> Token | None:
        """Return the token *offset* positions ahead without consuming, or None past EOF."""
        index = self._pos + offset
        if index < len(self._tokens):
            return self._tokens[index]
        return None

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._current().type == TokenType.EOF

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without
        consuming).
        """
        return self._current().type in types

    def _will_match(self, *types: TokenType) -> bool:
        """Return True if the upcoming tokens have exactly the given types, in order."""
        for offset, token_type in enumerate(types):
            tok = self._peek(offset)
            if tok is None or tok.type != token_type:
                return False
        return True

    def _match(self, token_type: TokenType) -> bool:
        """Consume the current token and return True if it has the given type."""
        if self._at_end() or self._current().type != token_type:
            return False
        self._pos += 1
        return True

    def _expect(self, token_type: TokenType, message: str) -> Token:
        """Consume the current token if it has the given type.

        Raises _DeclarationError located at the current token otherwise.
        """
        if not self._match(token_type):
            raise self._unexpected(message)
        return self._tokens[self._pos - 1]

    def _unexpected(self, message: str) -> _DeclarationError:
        tok = self._current()
        return _DeclarationError(
            Located(UnexpectedToken(tok.type, tok.lexeme, message), tok.line, tok.column)
        )

    def _synchronize(self) -> None:
        """Skip tokens up to the next one that can start a module declaration."""
        start = self._pos
        while not self._at_end():
            tok = self._current()
            if tok.type in _SYNC_TOKENS:
                break
            if tok.type == TokenType.FRAMEWORK and self._will_match(TokenType.FRAMEWORK, TokenType.MODULE):
                break
            self._pos += 1
        logger.debug("Skipped %d token(s) while synchronizing", self._pos - start)

    # ------------------------------------------------------------------
    # Module declarations
    # ------------------------------------------------------------------

    def _parse_module_declaration(self) -> ModuleDeclaration:
        """Parse a local or extern module declaration."""
        if self._check(TokenType.EXTERN):
            return self._parse_extern_module()
        return self._parse_local_module()

    def _parse_local_module(self) -> LocalModuleDeclaration:
        """Parse: [explicit] [framework] module <module-id> [attr]* { <member>* }"""
        explicit = self._match(TokenType.EXPLICIT)
        framework = self._match(TokenType.FRAMEWORK)
        self._expect(TokenType.MODULE, "Expected 'module' declaration")
        module_id = self._parse_module_id()
        attributes = self._parse_attributes()
        members = self._parse_module_members_block()
        return LocalModuleDeclaration(
            explicit=explicit,
            framework=framework,
            module_id=module_id,
            attributes=attributes,
            members=members,
        )

    def _parse_extern_module(self) -> ExternModuleDeclaration:
        """Parse: extern module <module-id> <string>"""
        self._expect(TokenType.EXTERN, "Expected 'extern' keyword")
        self._expect(TokenType.MODULE, "Expected 'module' keyword")
        module_id = self._parse_module_id()
        path_tok = self._expect(TokenType.STRING, "Expected file path string literal")
        return ExternModuleDeclaration(module_id=module_id, file_path=path_tok.string_value)

    def _parse_module_id(self) -> ModuleId:
        """Parse: <identifier> (. <identifier>)*"""
        components = [self._expect(TokenType.IDENTIFIER, "Expected module identifier").lexeme]
        while self._match(TokenType.DOT):
            components.append(self._expect(TokenType.IDENTIFIER, "Expected module identifier component").lexeme)
        return ModuleId(components=components)

    def _parse_attributes(self) -> list[str]:
        """Parse: ([ <identifier> ])*"""
        attributes: list[str] = []
        while self._match(TokenType.LBRACKET):
            attributes.append(self._expect(TokenType.IDENTIFIER, "Expected attribute identifier").lexeme)
            self._expect(TokenType.RBRACKET, "Expected ']' after attribute")
        return attributes

    def _parse_module_members_block(self) -> list[ModuleMember]:
        """Parse: { <member>* }"""
        self._expect(TokenType.LBRACE, "Expected '{' after module declaration")
        members: list[ModuleMember] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            members.append(self._parse_module_member())
        self._expect(TokenType.RBRACE, "Expected '}' after module members block")
        return members

    # ------------------------------------------------------------------
    # Member dispatch
    # ------------------------------------------------------------------

    def _parse_module_member(self) -> ModuleMember:
        """Parse one member, resolving the keyword-sharing productions by lookahead."""
        if self._can_parse_header_declaration():
            return self._parse_header_declaration()
        if self._can_parse_submodule_declaration():
            return self._parse_submodule_declaration()

        token_type = self._current().type
        if token_type == TokenType.REQUIRES:
            return self._parse_requires_declaration()
        if token_type == TokenType.UMBRELLA:
            return self._parse_umbrella_directory_declaration()
        if token_type == TokenType.EXPORT:
            return self._parse_export_declaration()
        if token_type == TokenType.EXPORT_AS:
            return self._parse_export_as_declaration()
        if token_type == TokenType.USE:
            return self._parse_use_declaration()
        if token_type == TokenType.LINK:
            return self._parse_link_declaration()
        if token_type == TokenType.CONFIG_MACROS:
            return self._parse_config_macros_declaration()
        if token_type == TokenType.CONFLICT:
            return self._parse_conflict_declaration()
        raise self._unexpected("Expected a module member declaration")

    def _can_parse_header_declaration(self) -> bool:
        if self._current().type in _HEADER_STARTS:
            return True
        # 'umbrella' starts both umbrella headers and umbrella directories.
        return self._will_match(TokenType.UMBRELLA, TokenType.HEADER)

    def _can_parse_submodule_declaration(self) -> bool:
        return any(self._will_match(*prefix) for prefix in _SUBMODULE_PREFIXES)

    # ------------------------------------------------------------------
    # requires
    # ------------------------------------------------------------------

    def _parse_requires_declaration(self) -> RequiresDeclaration:
        """Parse: requires <feature> (, <feature>)*"""
        self._expect(TokenType.REQUIRES, "Expected 'requires' keyword")
        features = [self._parse_feature()]
        while self._match(TokenType.COMMA):
            features.append(self._parse_feature())
        return RequiresDeclaration(features=features)

    def _parse_feature(self) -> Feature:
        """Parse: [!] <identifier>"""
        incompatible = self._match(TokenType.BANG)
        identifier = self._expect(TokenType.IDENTIFIER, "Expected feature identifier").lexeme
        return Feature(incompatible=incompatible, identifier=identifier)

    # ------------------------------------------------------------------
    # Headers and umbrella directories
    # ------------------------------------------------------------------

    def _parse_header_declaration(self) -> HeaderDeclaration:
        """Parse: <header-kind> header <string> [{ (<identifier> <integer>)* }]"""
        header_kind = self._parse_header_kind()
        self._expect(TokenType.HEADER, "Expected 'header' declaration")
        path_tok = self._expect(TokenType.STRING, "Expected file path string literal")
        return HeaderDeclaration(
            header_kind=header_kind,
            file_path=path_tok.string_value,
            header_attributes=self._parse_header_attributes(),
        )

    def _parse_header_kind(self) -> HeaderKind:
        if self._match(TokenType.UMBRELLA):
            return UmbrellaHeader()
        if self._match(TokenType.EXCLUDE):
            return ExcludeHeader()
        private = self._match(TokenType.PRIVATE)
        if self._match(TokenType.TEXTUAL):
            return TextualHeader(private=private)
        return StandardHeader(private=private)

    def _parse_header_attributes(self) -> list[HeaderAttribute]:
        if not self._match(TokenType.LBRACE):
            return []
        attributes: list[HeaderAttribute] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            key = self._expect(TokenType.IDENTIFIER, "Expected header attribute key identifier").lexeme
            value_tok = self._expect(TokenType.INTEGER, "Expected header attribute value integer")
            attributes.append(HeaderAttribute(key=key, value=self._integer_value(value_tok)))
        self._expect(TokenType.RBRACE, "Expected '}' after header attributes")
        return attributes

    def _integer_value(self, tok: Token) -> int:
        """Convert an integer literal, which must fit a signed 64-bit integer."""
        # Count significant digits first so oversized literals never reach int().
        digits = tok.lexeme.lstrip("0") or "0"
        if len(digits) > len(str(INT64_MAX)) or int(digits) > INT64_MAX:
            raise _DeclarationError(Located(FailedToMakeIntegerFromLexeme(tok.lexeme), tok.line, tok.column))
        return int(digits)

    def _parse_umbrella_directory_declaration(self) -> UmbrellaDirectoryDeclaration:
        """Parse: umbrella <string>"""
        self._expect(TokenType.UMBRELLA, "Expected 'umbrella' keyword")
        path_tok = self._expect(TokenType.STRING, "Expected directory path string literal")
        return UmbrellaDirectoryDeclaration(file_path=path_tok.string_value)

    # ------------------------------------------------------------------
    # Submodules
    # ------------------------------------------------------------------

    def _parse_submodule_declaration(self) -> SubmoduleDeclaration:
        """Parse a nested module, telling inferred submodules apart by the '*' after 'module'."""
        offset = next(len(prefix) - 1 for prefix in _SUBMODULE_PREFIXES if self._will_match(*prefix))
        following = self._peek(offset + 1)
        if following is not None and following.type == TokenType.STAR:
            return SubmoduleDeclaration(declaration=self._parse_inferred_submodule_declaration())
        return SubmoduleDeclaration(declaration=self._parse_module_declaration())

    def _parse_inferred_submodule_declaration(self) -> InferredSubmoduleDeclaration:
        """Parse: [explicit] [framework] module * [attr]* { (export *)* }"""
        explicit = self._match(TokenType.EXPLICIT)
        framework = self._match(TokenType.FRAMEWORK)
        self._expect(TokenType.MODULE, "Expected 'module' declaration")
        self._expect(TokenType.STAR, "Expected '*' symbol")
        attributes = self._parse_attributes()
        self._expect(TokenType.LBRACE, "Expected '{' after module declaration")
        members: list[InferredSubmoduleMember] = []
        while not self._check(TokenType.RBRACE, TokenType.EOF):
            self._expect(TokenType.EXPORT, "Expected 'export' keyword")
            self._expect(TokenType.STAR, "Expected '*' symbol")
            members.append(InferredSubmoduleMember())
        self._expect(TokenType.RBRACE, "Expected '}' after module members block")
        return InferredSubmoduleDeclaration(
            explicit=explicit,
            framework=framework,
            attributes=attributes,
            members=members,
        )

    # ------------------------------------------------------------------
    # export, export_as, use
    # ------------------------------------------------------------------

    def _parse_export_declaration(self) -> ExportDeclaration:
        """Parse: export <wildcard-module-id>"""
        self._expect(TokenType.EXPORT, "Expected 'export' keyword")
        components = self._parse_wildcard_module_id_components()
        trailing_star = self._match(TokenType.STAR)
        return ExportDeclaration(module_id=WildcardModuleId(components=components, trailing_star=trailing_star))

    def _parse_wildcard_module_id_components(self) -> list[str]:
        """Parse the dotted identifiers of a wildcard module id, stopping before any '*'."""
        if self._will_match(TokenType.IDENTIFIER, TokenType.DOT):
            component = self._expect(TokenType.IDENTIFIER, "Expected identifier").lexeme
            self._expect(TokenType.DOT, "Expected '.' symbol")
            return [component, *self._parse_wildcard_module_id_components()]
        if self._check(TokenType.IDENTIFIER):
            return [self._expect(TokenType.IDENTIFIER, "Expected identifier").lexeme]
        if self._check(TokenType.STAR):
            return []
        raise self._unexpected("Expected a wildcard module identifier component")

    def _parse_export_as_declaration(self) -> ExportAsDeclaration:
        """Parse: export_as <identifier>"""
        self._expect(TokenType.EXPORT_AS, "Expected 'export_as' keyword")
        identifier = self._expect(TokenType.IDENTIFIER, "Expected module name identifier").lexeme
        return ExportAsDeclaration(identifier=identifier)

    def _parse_use_declaration(self) -> UseDeclaration:
        """Parse: use <module-id>"""
        self._expect(TokenType.USE, "Expected 'use' keyword")
        return UseDeclaration(module_id=self._parse_module_id())

    # ------------------------------------------------------------------
    # link, config_macros, conflict
    # ------------------------------------------------------------------

    def _parse_link_declaration(self) -> LinkDeclaration:
        """Parse: link [framework] <string>"""
        self._expect(TokenType.LINK, "Expected 'link' keyword")
        framework = self._match(TokenType.FRAMEWORK)
        name_tok = self._expect(TokenType.STRING, "Expected library or framework name string literal")
        return LinkDeclaration(framework=framework, library_or_framework_name=name_tok.string_value)

    def _parse_config_macros_declaration(self) -> ConfigMacrosDeclaration:
        """Parse: config_macros [attr]* [<identifier> (, <identifier>)*]"""
        self._expect(TokenType.CONFIG_MACROS, "Expected 'config_macros' keyword")
        attributes = self._parse_attributes()
        macro_names: list[str] = []
        if self._check(TokenType.IDENTIFIER):
            macro_names.append(self._expect(TokenType.IDENTIFIER, "Expected macro identifier").lexeme)
            while self._match(TokenType.COMMA):
                macro_names.append(self._expect(TokenType.IDENTIFIER, "Expected macro identifier").lexeme)
        return ConfigMacrosDeclaration(attributes=attributes, macro_names=macro_names)

    def _parse_conflict_declaration(self) -> ConflictDeclaration:
        """Parse: conflict <module-id> , <string>"""
        self._expect(TokenType.CONFLICT, "Expected 'conflict' keyword")
        module_id = self._parse_module_id()
        self._expect(TokenType.COMMA, "Expected ',' symbol")
        message_tok = self._expect(TokenType.STRING, "Expected diagnostic message string literal")
        return ConflictDeclaration(module_id=module_id, diagnostic_message=message_tok.string_value)
