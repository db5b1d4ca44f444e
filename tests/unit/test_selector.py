"""
Candidate selection tests

Module gate and per-statement pre-filter.
"""

from lazy_transform.config import FrameworkConfig
from lazy_transform.domain import factory
from lazy_transform.domain.models import (
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    Module,
    NamedImports,
    RawStatement,
    StringLiteral,
)
from lazy_transform.rewrite.selector import (
    is_candidate_import,
    select_candidate_imports,
    should_process_module,
    starts_uppercase,
)

REACT_IMPORT = factory.create_import_declaration("react", namespace="React")


def module(*statements, file_name="app.tsx") -> Module:
    return Module(file_name=file_name, statements=tuple(statements))


class TestModuleGate:
    def test_module_importing_react_is_processed(self):
        assert should_process_module(module(REACT_IMPORT), FrameworkConfig())

    def test_module_without_react_import_is_skipped(self):
        mod = module(
            factory.create_import_declaration("./component1", default_name="MyComp1"),
            RawStatement("export default 1;"),
        )

        assert not should_process_module(mod, FrameworkConfig())

    def test_specifier_must_match_exactly(self):
        mod = module(factory.create_import_declaration("react-dom", namespace="ReactDOM"))

        assert not should_process_module(mod, FrameworkConfig())

    def test_declaration_files_are_skipped(self):
        assert not should_process_module(module(REACT_IMPORT, file_name="types.d.ts"), FrameworkConfig())

    def test_custom_framework_module(self):
        preact = FrameworkConfig(module_specifier="preact/compat", root_identifier="Preact")
        mod = module(factory.create_import_declaration("preact/compat", namespace="Preact"))

        assert should_process_module(mod, preact)
        assert not should_process_module(module(REACT_IMPORT), preact)


class TestCandidateImports:
    def test_uppercase_default_binding(self):
        decl = factory.create_import_declaration("./component1", default_name="MyComp1")

        assert is_candidate_import(decl)

    def test_lowercase_bindings_only(self):
        decl = factory.create_import_declaration("./utils", default_name="utils", named=["helper"])

        assert not is_candidate_import(decl)

    def test_any_uppercase_named_binding(self):
        decl = factory.create_import_declaration("./component1", named=["helper", "MyComp2"])

        assert is_candidate_import(decl)

    def test_alias_local_name_decides(self):
        aliased_lower = factory.create_import_declaration("./component1", named=[("MyComp1", "myComp")])
        aliased_upper = factory.create_import_declaration("./component1", named=[("myComp", "MyComp")])

        assert not is_candidate_import(aliased_lower)
        assert is_candidate_import(aliased_upper)

    def test_namespace_import_is_not_a_candidate(self):
        assert not is_candidate_import(REACT_IMPORT)

    def test_side_effect_import_is_not_a_candidate(self):
        assert not is_candidate_import(factory.create_import_declaration("./styles.css"))

    def test_type_only_statement_is_not_a_candidate(self):
        decl = ImportDeclaration(
            module_specifier=StringLiteral("./types"),
            default_name=Identifier("Props"),
            is_type_only=True,
        )

        assert not is_candidate_import(decl)

    def test_type_only_specifiers_are_ignored(self):
        decl = ImportDeclaration(
            module_specifier=StringLiteral("./component1"),
            named_bindings=NamedImports(
                (
                    ImportSpecifier(Identifier("Props"), is_type_only=True),
                    ImportSpecifier(Identifier("helper")),
                )
            ),
        )

        assert not is_candidate_import(decl)

    def test_select_keeps_source_order_and_identity(self):
        first = factory.create_import_declaration("./a", default_name="A")
        skipped = factory.create_import_declaration("./b", default_name="b")
        second = factory.create_import_declaration("./c", named=["C"])
        mod = module(REACT_IMPORT, first, skipped, RawStatement("const x = 1;"), second)

        selected = select_candidate_imports(mod)

        assert len(selected) == 2
        assert selected[0] is first
        assert selected[1] is second


def test_starts_uppercase():
    assert starts_uppercase("MyComp")
    assert starts_uppercase("Ä")
    assert not starts_uppercase("myComp")
    assert not starts_uppercase("_Comp")
    assert not starts_uppercase("$Comp")
    assert not starts_uppercase("")
