"""
Tree-sitter program (symbol oracle) tests
"""

import pytest

from lazy_transform.domain.models import (
    ClassDeclaration,
    ExportAssignment,
    FunctionDeclaration,
    FunctionExpression,
    VariableDeclaration,
)
from lazy_transform.domain.symbols import JSX_ELEMENT
from lazy_transform.exceptions import ParsingError
from lazy_transform.infrastructure.program import TreeSitterProgram
from lazy_transform.rewrite.classifier import ComponentClassifier


def exports_of(program: TreeSitterProgram, specifier: str, importing_file: str = "app.tsx") -> dict:
    symbols = program.get_exports_of_module(specifier, importing_file)
    assert symbols is not None
    return {symbol.name: symbol for symbol in symbols}


class TestResolution:
    def test_relative_specifier_with_extension_search(self):
        program = TreeSitterProgram({"src/app.tsx": "", "src/components/button.tsx": ""})

        assert program.resolve_module("./components/button", "src/app.tsx") == "src/components/button.tsx"

    def test_parent_directory_and_index(self):
        program = TreeSitterProgram({"src/pages/home.tsx": "", "src/widgets/index.ts": ""})

        assert program.resolve_module("../widgets", "src/pages/home.tsx") == "src/widgets/index.ts"

    def test_bare_specifier_in_node_modules(self):
        program = TreeSitterProgram({"app.tsx": "", "node_modules/@types/react/index.d.ts": ""})

        assert program.resolve_module("react", "app.tsx") == "node_modules/@types/react/index.d.ts"

    def test_unresolved_module(self):
        program = TreeSitterProgram({"app.tsx": ""})

        assert program.resolve_module("./missing", "app.tsx") is None
        assert program.get_exports_of_module("./missing", "app.tsx") is None

    def test_unknown_extension_fails_to_parse(self):
        program = TreeSitterProgram({"styles.css": "a {}"})

        with pytest.raises(ParsingError):
            program.get_tree("styles.css")


class TestExports:
    def test_declaration_kinds(self):
        program = TreeSitterProgram(
            {
                "lib.tsx": """
export default function (props: any) {
    return <p />;
}
export class Panel extends React.Component<any> {}
export const Item = (props: any) => <li />;
export function helper(a: number, b: number, c: number) {
    return a;
}
""",
            }
        )

        exports = exports_of(program, "./lib")

        assert isinstance(exports["default"].value_declaration, ExportAssignment)
        assert isinstance(exports["default"].value_declaration.expression, FunctionExpression)
        assert isinstance(exports["Panel"].value_declaration, ClassDeclaration)
        assert isinstance(exports["Item"].value_declaration, VariableDeclaration)
        assert isinstance(exports["helper"].value_declaration, FunctionDeclaration)
        assert len(exports["helper"].value_declaration.parameters) == 3

    def test_export_clause_and_default_identifier(self):
        program = TreeSitterProgram(
            {
                "lib.tsx": """
function Card(props: any) {
    return <div />;
}
const value = 1;
export { value as count };
export default Card;
""",
            }
        )

        exports = exports_of(program, "./lib")

        assert set(exports) == {"count", "default"}
        assert isinstance(exports["default"].value_declaration, FunctionDeclaration)
        assert exports["default"].value_declaration.name == "Card"

    def test_reexports(self):
        program = TreeSitterProgram(
            {
                "button.tsx": "export function Button(props: any) { return <button />; }\n",
                "list.tsx": "export const List = (props: any) => <ul />;\n",
                "index.ts": 'export { Button as PrimaryButton } from "./button";\nexport * from "./list";\n',
            }
        )

        exports = exports_of(program, "./index")

        assert set(exports) == {"PrimaryButton", "List"}
        assert exports["PrimaryButton"].value_declaration.name == "Button"

    def test_type_only_exports_are_skipped(self):
        program = TreeSitterProgram({"types.ts": "export type Props = { a: number };\nexport type { Other } from './o';\n"})

        assert exports_of(program, "./types") == {}

    def test_overloads_merge_into_one_declaration(self):
        program = TreeSitterProgram(
            {
                "lib.tsx": """
export function Pick(props: { a: string }): JSX.Element;
export function Pick(props: { b: number }): string;
export function Pick(props: any): any {
    return null;
}
""",
            }
        )

        symbol = exports_of(program, "./lib")["Pick"]
        handle = program.get_type_of_symbol(symbol)

        assert symbol.value_declaration is not None
        assert handle.call_signatures[0].return_type == JSX_ELEMENT
        assert len(handle.call_signatures) == 2


class TestTypes:
    def types_of(self, source: str) -> dict:
        program = TreeSitterProgram({"lib.tsx": source})
        exports = exports_of(program, "./lib")
        return {name: program.get_type_of_symbol(symbol) for name, symbol in exports.items()}

    def test_inferred_jsx_return(self):
        types = self.types_of(
            """
export function A(props: any) {
    if (props.x) {
        return <p />;
    }
    return <div />;
}
export const B = (props: any) => (props.x ? <p /> : <div />);
"""
        )

        assert types["A"].call_signatures[0].return_type == JSX_ELEMENT
        assert types["B"].call_signatures[0].return_type == JSX_ELEMENT

    def test_mixed_returns_have_no_symbol(self):
        types = self.types_of(
            """
export function A(props: any) {
    if (props.x) {
        return null;
    }
    return <div />;
}
"""
        )

        assert types["A"].call_signatures[0].return_type is None

    def test_annotated_return_type(self):
        types = self.types_of(
            """
export function A(props: any): JSX.Element {
    return render(props);
}
export function B(props: any): JSX.Element | null {
    return null;
}
"""
        )

        assert types["A"].call_signatures[0].return_type == JSX_ELEMENT
        assert types["B"].call_signatures[0].return_type is None

    def test_nested_function_returns_are_ignored(self):
        types = self.types_of(
            """
export function A(props: any) {
    const inner = () => {
        return 1;
    };
    return <div />;
}
"""
        )

        assert types["A"].call_signatures[0].return_type == JSX_ELEMENT

    def test_constant_has_no_call_signature(self):
        types = self.types_of('export const A = "123";\n')

        assert types["A"].call_signatures == ()


class TestClassifierThroughProgram:
    def test_components_across_files(self):
        program = TreeSitterProgram(
            {
                "lib.tsx": """
import * as React from "react";
export class Panel extends React.Component<any> {}
export class Plain {}
export function Card(props: any, context: any) {
    return <div />;
}
export function Wide(a: any, b: any, c: any) {
    return <div />;
}
export namespace Card2 {}
""",
            }
        )
        classifier = ComponentClassifier(program)

        assert classifier.is_component("./lib", "Panel", "app.tsx")
        assert classifier.is_component("./lib", "Card", "app.tsx")
        assert not classifier.is_component("./lib", "Plain", "app.tsx")
        assert not classifier.is_component("./lib", "Wide", "app.tsx")
        assert not classifier.is_component("./lib", "Card2", "app.tsx")
        assert not classifier.is_component("./missing", "Card", "app.tsx")

    def test_circular_star_exports_do_not_raise(self):
        program = TreeSitterProgram(
            {
                "a.ts": 'export * from "./b";\nexport const A = 1;\n',
                "b.ts": 'export * from "./a";\nexport const B = 2;\n',
            }
        )

        exports = exports_of(program, "./a", "app.ts")

        assert {"A", "B"} <= set(exports)


class TestOverloadsAndAssets:
    OVERLOADED = """
export function Pick(props: any): JSX.Element;
export function Pick(a: any, b: any, c: any): string;
export function Pick(a: any, b?: any, c?: any): any {
    return null;
}
"""

    def test_first_overload_is_the_value_declaration(self):
        program = TreeSitterProgram({"lib.tsx": self.OVERLOADED})

        symbol = exports_of(program, "./lib")["Pick"]

        assert len(symbol.value_declaration.parameters) == 1
        assert ComponentClassifier(program).is_component("./lib", "Pick", "app.tsx")

    def test_unparseable_file_does_not_resolve(self):
        program = TreeSitterProgram({"app.tsx": "", "logo.svg": "<svg />"})

        assert program.resolve_module("./logo.svg", "app.tsx") is None
        assert not ComponentClassifier(program).is_component("./logo.svg", "default", "app.tsx")
