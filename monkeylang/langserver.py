"""
Monkey Language Server entry point.

This server provides basic language features for Monkey source files using
`pygls`. It reuses the Monkey lexer and parser to publish parse diagnostics
and to build a simple symbol index of top-level ``let`` bindings, supporting
definition lookup, hover information, and document symbols.

stdout carries the protocol, so the server reports problems through the
client's log window rather than printing.


File: langserver.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    MessageType,
    Position,
    Range,
    SymbolKind,
)

from monkeylang.ast_nodes import FunctionLiteral, LetStatement
from monkeylang.lexer import tokenize
from monkeylang.parser import Parser

SOURCE_SUFFIX = ".mky"


@dataclass
class MonkeySymbol:
    """Represents a top-level binding in a Monkey file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    detail: str
    column: int = 0

    def name_range(self) -> Range:
        """Range of the bound name itself."""
        return Range(
            Position(self.line, self.column),
            Position(self.line, self.column + len(self.name)),
        )


def _line_range(text: str, line: int) -> Range:
    """Range covering a whole 0-based line of ``text``."""
    lines = text.splitlines()
    length = len(lines[line]) if 0 <= line < len(lines) else 0
    return Range(Position(line, 0), Position(line, length))


def analyze(uri: str, text: str) -> tuple[List[MonkeySymbol], List[Diagnostic]]:
    """
    Parse ``text`` and extract top-level symbols and parse diagnostics.
    """
    parser = Parser(tokenize(text), uri)
    program, _ = parser.parse_program()

    diagnostics = [
        Diagnostic(
            range=_line_range(text, d.line - 1),
            message=d.message,
            severity=DiagnosticSeverity.Error,
            source="monkey",
        )
        for d in parser.diagnostics
    ]

    symbols: List[MonkeySymbol] = []
    for node in program.statements:
        if not isinstance(node, LetStatement):
            continue
        name = node.name.value
        line = node.name.line - 1
        column = node.name.column
        if isinstance(node.value, FunctionLiteral):
            params = ", ".join(p.value for p in node.value.parameters)
            symbols.append(
                MonkeySymbol(
                    name, SymbolKind.Function, uri, line, f"let {name} = fn({params})", column
                )
            )
        else:
            symbols.append(
                MonkeySymbol(name, SymbolKind.Variable, uri, line, f"let {name}", column)
            )
    return symbols, diagnostics


class MonkeyLanguageServer(LanguageServer):
    """Language server for Monkey source files."""

    def __init__(self) -> None:
        super().__init__("monkey-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[MonkeySymbol]] = {}
        self.global_symbols: Dict[str, List[MonkeySymbol]] = {}
        self.indexed_workspace = False

    def _index_workspace(self) -> None:
        """Parse all Monkey files under the current workspace."""
        root = self.workspace.root_path
        if not root:
            self.indexed_workspace = True
            return
        for path in Path(root).rglob(f"*{SOURCE_SUFFIX}"):
            uri = path.as_uri()
            if uri in self.symbols_by_uri:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as e:
                self.show_message_log(f"[LSP] Failed to index {path}: {e}", MessageType.Warning)
                continue
            self.update_index(uri, text)
        self.indexed_workspace = True

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Parse ``text``, update the symbol index for ``uri`` and return
        its diagnostics."""
        symbols, diagnostics = analyze(uri, text)
        self.symbols_by_uri[uri] = symbols
        self._rebuild_global_index()
        return diagnostics

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def lookup(self, word: str) -> Optional[MonkeySymbol]:
        """First indexed binding named ``word``."""
        matches = self.global_symbols.get(word)
        if not matches:
            return None
        return matches[0]


lang_server = MonkeyLanguageServer()


def _refresh(ls: MonkeyLanguageServer, uri: str, text: str) -> None:
    diagnostics = ls.update_index(uri, text)
    ls.publish_diagnostics(uri, diagnostics)


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: MonkeyLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document and publish its diagnostics when it is opened."""
    _refresh(ls, params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: MonkeyLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    _refresh(ls, doc.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: MonkeyLanguageServer, params: DefinitionParams):
    """Return the definition location for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    if not ls.indexed_workspace:
        ls._index_workspace()
    sym = ls.lookup(word)
    if sym is None:
        return None
    return Location(uri=sym.uri, range=sym.name_range())


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: MonkeyLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the symbol under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    if not ls.indexed_workspace:
        ls._index_workspace()
    sym = ls.lookup(word)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: MonkeyLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        rng = sym.name_range()
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()
