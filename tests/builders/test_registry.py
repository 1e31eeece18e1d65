"""
Unit tests for the builder registry lookups.
"""

import pytest

from starterkit.builders.descriptor import ExternalDependency
from starterkit.builders.registry import (
    BUILTIN_BUILDERS,
    DEFAULT_BUILDER,
    BuilderRegistry,
    LookupResult,
)
from starterkit.core.diagnostics import DiagnosticKind
from starterkit.core.exceptions import BuilderRegistryError, UnknownBuilderError

BUILTINS = ["Module::Build", "Module::Install", "ExtUtils::MakeMaker"]


class TestRegistryInit:
    """Test BuilderRegistry construction."""

    def test_builtin_table(self, registry):
        """Test default registry holds exactly the built-in builders."""
        assert registry.supported_builders() == frozenset(BUILTINS)
        assert len(registry) == 3

    def test_default_builder(self, registry):
        """Test default builder is MakeMaker and is a valid key."""
        assert registry.default_builder() == "ExtUtils::MakeMaker"
        assert registry.default_builder() == DEFAULT_BUILDER
        assert registry.default_builder() in registry.entries

    def test_custom_table(self, custom_registry):
        """Test injected tables replace the built-in one."""
        assert custom_registry.supported_builders() == {"Alpha", "Beta"}
        assert custom_registry.default_builder() == "Beta"

    def test_default_must_exist(self):
        """Test construction fails when the default is missing."""
        with pytest.raises(BuilderRegistryError, match="Nope"):
            BuilderRegistry(BUILTIN_BUILDERS, default="Nope")

    def test_entries_read_only(self, registry):
        """Test the table cannot be modified through the registry."""
        with pytest.raises(TypeError):
            registry.entries["Module::Build"] = None

    def test_copy_of_injected_table(self):
        """Test later changes to the source mapping don't leak in."""
        source = dict(BUILTIN_BUILDERS)
        reg = BuilderRegistry(source)
        source.pop("Module::Build")
        assert "Module::Build" in reg


class TestLookup:
    """Test lookup and strict lookup."""

    @pytest.mark.parametrize("builder", BUILTINS)
    def test_builtin_descriptors_complete(self, registry, builder):
        """Test every built-in builder has complete metadata."""
        result = registry.lookup(builder)

        assert result
        assert result.descriptor.output_file
        assert result.descriptor.create_method_name
        assert result.descriptor.manifest_method_name
        assert result.descriptor.instructions
        assert result.diagnostics == ()

    @pytest.mark.parametrize("empty", [None, ""])
    def test_empty_means_default(self, registry, empty):
        """Test empty identifiers resolve to the default builder."""
        result = registry.lookup(empty)
        assert result.builder == "ExtUtils::MakeMaker"
        assert result.descriptor == registry.lookup("ExtUtils::MakeMaker").descriptor

    def test_lookup_without_argument(self, registry):
        """Test lookup() with no argument uses the default."""
        assert registry.lookup().builder == registry.default_builder()

    def test_unknown_builder(self, registry, warnings_log):
        """Test unknown builder yields an empty result and one warning."""
        result = registry.lookup("NoSuchBuilder")

        assert isinstance(result, LookupResult)
        assert not result
        assert result.descriptor is None
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].kind is DiagnosticKind.UNKNOWN_BUILDER
        assert result.diagnostics[0].builder == "NoSuchBuilder"
        assert warnings_log() == [
            "Don't know anything about builder 'NoSuchBuilder'."
        ]

    def test_known_builder_no_warning(self, registry, warnings_log):
        """Test successful lookups stay quiet."""
        registry.lookup("Module::Build")
        assert warnings_log() == []

    def test_require_known(self, registry):
        """Test strict lookup returns the descriptor."""
        assert registry.require("Module::Build").output_file == "Build.PL"
        assert registry.require() is registry.entries[DEFAULT_BUILDER]

    def test_require_unknown(self, registry):
        """Test strict lookup raises for unknown builders."""
        with pytest.raises(UnknownBuilderError) as exc_info:
            registry.require("Bogus")
        assert exc_info.value.builder == "Bogus"

    def test_has_builder(self, registry):
        """Test membership helpers."""
        assert registry.has_builder("Module::Install")
        assert not registry.has_builder("Bogus")
        assert not registry.has_builder("")
        assert not registry.has_builder(None)
        assert "Module::Build" in registry


class TestAccessors:
    """Test per-field accessors."""

    def test_file_for_builder(self, registry):
        """Test output files of the built-in builders."""
        assert registry.file_for_builder("Module::Build") == "Build.PL"
        assert registry.file_for_builder("Module::Install") == "Makefile.PL"
        assert registry.file_for_builder("ExtUtils::MakeMaker") == "Makefile.PL"
        assert registry.file_for_builder() == "Makefile.PL"

    def test_create_method_for_builder(self, registry):
        """Test generator routine identifiers."""
        assert registry.create_method_for_builder("Module::Build") == "create_Build_PL"
        assert (
            registry.create_method_for_builder("Module::Install")
            == "create_MI_Makefile_PL"
        )
        assert registry.create_method_for_builder("") == "create_Makefile_PL"

    def test_manifest_method_for_builder(self, registry):
        """Test manifest routine identifiers."""
        assert registry.manifest_method_for_builder("Module::Build") == "create_MB_MANIFEST"
        assert registry.manifest_method_for_builder("Module::Install") == "create_MI_MANIFEST"
        assert (
            registry.manifest_method_for_builder("ExtUtils::MakeMaker")
            == "create_EUMM_MANIFEST"
        )

    def test_instructions_for_builder(self, registry):
        """Test instructions are returned in the order users run them."""
        assert registry.instructions_for_builder("Module::Build") == (
            "perl Build.PL",
            "./Build",
            "./Build test",
            "./Build install",
        )
        assert registry.instructions_for_builder("Module::Install") == (
            "perl Makefile.PL",
            "make",
            "make test",
            "make install",
        )

    def test_dependencies_for_builder(self, registry):
        """Test only MakeMaker needs host commands."""
        assert registry.dependencies_for_builder("Module::Build") == ()
        assert registry.dependencies_for_builder("Module::Install") == ()
        assert registry.dependencies_for_builder("ExtUtils::MakeMaker") == (
            ExternalDependency("make", ("make", "gmake")),
            ExternalDependency("chmod", ("chmod",)),
        )

    def test_accessors_on_unknown_builder(self, registry, warnings_log):
        """Test each accessor returns an empty answer and warns once."""
        assert registry.file_for_builder("Bogus") is None
        assert registry.create_method_for_builder("Bogus") is None
        assert registry.manifest_method_for_builder("Bogus") is None
        assert registry.instructions_for_builder("Bogus") == ()
        assert registry.dependencies_for_builder("Bogus") == ()

        assert len(warnings_log()) == 5

    def test_repr(self, registry):
        """Test repr lists builders and default."""
        text = repr(registry)
        assert "BuilderRegistry" in text
        assert "'ExtUtils::MakeMaker'" in text
