"""
Printer tests
"""

import pytest

from lazy_transform.domain import factory
from lazy_transform.domain.models import (
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    Module,
    NamedImports,
    Parameter,
    RawStatement,
    StringLiteral,
)
from lazy_transform.exceptions import EmitError
from lazy_transform.infrastructure.printer import Printer, print_module


@pytest.fixture
def printer():
    return Printer()


class TestImports:
    def test_source_text_is_printed_verbatim(self, printer):
        decl = ImportDeclaration(
            StringLiteral("./a", "'"),
            default_name=Identifier("A"),
            source_text="import   A from './a'",
        )

        assert printer.print_node(decl) == "import   A from './a'"

    def test_default_and_named(self, printer):
        decl = factory.create_import_declaration("./a", default_name="A", named=["B", ("C", "D")])

        assert printer.print_node(decl) == 'import A, { B, C as D } from "./a";'

    def test_namespace(self, printer):
        assert printer.print_node(factory.create_import_declaration("react", namespace="React")) == (
            'import * as React from "react";'
        )

    def test_side_effect_import(self, printer):
        assert printer.print_node(factory.create_import_declaration("./styles.css")) == 'import "./styles.css";'

    def test_type_only(self, printer):
        decl = ImportDeclaration(
            StringLiteral("./types"),
            named_bindings=NamedImports((ImportSpecifier(Identifier("Props")),)),
            is_type_only=True,
        )

        assert printer.print_node(decl) == 'import type { Props } from "./types";'


class TestExpressions:
    def test_lazy_binding(self, printer):
        statement = factory.create_const_statement(
            "MyComp1",
            factory.create_call(
                factory.create_property_access("React", "lazy"),
                [factory.create_arrow_function([], factory.create_import_call(StringLiteral("./component1")))],
            ),
        )

        assert printer.print_node(statement) == 'const MyComp1 = React.lazy(() => import("./component1"));'

    def test_arrow_with_two_parameters(self, printer):
        arrow = factory.create_arrow_function(["a", "b"], Identifier("a"))

        assert printer.print_node(arrow) == "(a, b) => a"

    def test_object_literal(self, printer):
        obj = factory.create_paren(factory.create_object_literal({"default": factory.create_property_access("m", "X")}))

        assert printer.print_node(obj) == "({ default: m.X })"

    def test_unknown_node_raises(self, printer):
        with pytest.raises(EmitError):
            printer.print_node(Parameter("p"))


class TestModules:
    def test_trivia_is_preserved(self):
        mod = Module(
            "a.tsx",
            (
                RawStatement("import a from 'a';", leading_trivia="// header\n"),
                RawStatement("a();", leading_trivia="\n\n"),
            ),
            trailing_trivia="\n",
        )

        assert print_module(mod) == "// header\nimport a from 'a';\n\na();\n"

    def test_synthesized_statements_get_newlines(self):
        mod = Module(
            "a.tsx",
            (
                RawStatement("first;", leading_trivia=""),
                RawStatement("second;"),
                RawStatement("third;"),
            ),
        )

        assert print_module(mod) == "first;\nsecond;\nthird;"

class TestModuleExportNames:
    def test_element_access_for_non_identifier_names(self, printer):
        access = factory.create_member_access("m", "my-comp")

        assert printer.print_node(access) == 'm["my-comp"]'

    def test_identifier_names_use_property_access(self, printer):
        assert printer.print_node(factory.create_member_access("m", "MyComp")) == "m.MyComp"
        assert printer.print_node(factory.create_member_access("m", "$comp")) == "m.$comp"

    def test_name_containing_double_quote(self, printer):
        assert printer.print_node(factory.create_member_access("m", 'a"b')) == "m['a\"b']"

    def test_string_named_import_specifier(self, printer):
        decl = factory.create_import_declaration("./lib", named=[("my-comp", "MyComp"), ("Other", "Alias")])

        assert printer.print_node(decl) == 'import { "my-comp" as MyComp, Other as Alias } from "./lib";'
