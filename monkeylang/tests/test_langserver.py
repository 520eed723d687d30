"""
Tests for the Monkey Language language server analysis.
"""
from lsprotocol.types import (
    DiagnosticSeverity,
    DocumentSymbolParams,
    SymbolKind,
    TextDocumentIdentifier,
)

from monkeylang.langserver import MonkeyLanguageServer, analyze, document_symbols

SOURCE = (
    "let add = fn(a, b) { a + b };\n"
    "let x = 5;\n"
    "add(x, 1);\n"
)


def test_analyze_symbols():
    """
    Test that top-level let bindings become symbols.
    """
    symbols, diagnostics = analyze("file:///add.mky", SOURCE)
    assert diagnostics == []
    assert [(s.name, s.kind, s.line, s.detail) for s in symbols] == [
        ("add", SymbolKind.Function, 0, "let add = fn(a, b)"),
        ("x", SymbolKind.Variable, 1, "let x"),
    ]
    assert all(s.uri == "file:///add.mky" for s in symbols)


def test_analyze_ignores_nested_bindings():
    """
    Test that lets inside function bodies are not indexed.
    """
    symbols, _ = analyze("file:///n.mky", "let f = fn() { let inner = 1; inner };")
    assert [s.name for s in symbols] == ["f"]


def test_analyze_diagnostics():
    """
    Test that parse diagnostics are converted to LSP diagnostics.
    """
    symbols, diagnostics = analyze("file:///bad.mky", "let x = 5;\nlet = 3;\n")
    assert [s.name for s in symbols] == ["x"]
    assert len(diagnostics) == 1
    diag = diagnostics[0]
    assert diag.message == "expected next token to be IDENT, got ASSIGN instead"
    assert diag.severity == DiagnosticSeverity.Error
    assert diag.source == "monkey"
    assert diag.range.start.line == 1
    assert diag.range.start.character == 0
    assert diag.range.end.character == len("let = 3;")


def test_server_index_and_lookup():
    """
    Test that indexed symbols can be found across documents.
    """
    server = MonkeyLanguageServer()
    assert server.update_index("file:///a.mky", SOURCE) == []
    server.update_index("file:///b.mky", "let y = add(1, 2);")

    assert server.lookup("add").uri == "file:///a.mky"
    assert server.lookup("y").uri == "file:///b.mky"
    assert server.lookup("missing") is None


def test_server_reindex_replaces_symbols():
    """
    Test that re-indexing a document drops its stale symbols.
    """
    server = MonkeyLanguageServer()
    server.update_index("file:///a.mky", "let old = 1;")
    server.update_index("file:///a.mky", "let new = 2;")
    assert server.lookup("old") is None
    assert server.lookup("new").detail == "let new"


def test_symbol_ranges_cover_the_name():
    """
    Test that symbol ranges start at the bound name, not at ``let``.
    """
    symbols, _ = analyze("file:///c.mky", "let a = 1; let bb = 2;\n  let add = fn() { 1 };")
    assert [(s.name, s.line, s.column) for s in symbols] == [
        ("a", 0, 4),
        ("bb", 0, 15),
        ("add", 1, 6),
    ]
    rng = symbols[1].name_range()
    assert (rng.start.line, rng.start.character) == (0, 15)
    assert (rng.end.line, rng.end.character) == (0, 17)


def test_document_symbols_use_name_ranges():
    """
    Test the document symbol response for an indexed document.
    """
    server = MonkeyLanguageServer()
    server.update_index("file:///d.mky", "let x = 5;\nlet inc = fn(n) { n + 1 };")
    params = DocumentSymbolParams(text_document=TextDocumentIdentifier(uri="file:///d.mky"))
    result = document_symbols(server, params)
    assert [(s.name, s.kind, s.detail) for s in result] == [
        ("x", SymbolKind.Variable, "let x"),
        ("inc", SymbolKind.Function, "let inc = fn(n)"),
    ]
    assert result[1].selection_range.start.character == 4
    assert result[1].selection_range.end.character == 7


def test_analyze_deeply_nested_document():
    """
    Test that a document nested too deeply to parse gives a diagnostic.
    """
    symbols, diagnostics = analyze("file:///deep.mky", "(" * 5000 + "1" + ")" * 5000)
    assert symbols == []
    assert [d.message for d in diagnostics] == ["maximum recursion depth exceeded"]
