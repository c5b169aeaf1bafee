"""
Extension system tests

Test classes:
    TestExtensionMeta      - ExtensionMeta dataclass
    TestExtensionBase      - ExtensionBase abstract class
    TestExtensionHandler   - installed extensions
    TestExtensionLoader    - initialize_extensions
    TestClassHooks         - class-based extension
    TestLegacyHooks        - procedural extension
    TestKernel             - build_kernel
"""

from __future__ import annotations

import dataclasses

import pytest

from themehooks.config import Settings
from themehooks.exceptions import ExtensionNotFoundError
from themehooks.extensions.base import ExtensionBase, ExtensionHandler, ExtensionMeta
from themehooks.extensions.loader import available_extensions, initialize_extensions
from themehooks.hooks.dispatcher import HelpContext, PageContext
from themehooks.hooks.names import HOOK_HELP, HOOK_PAGE_ATTACHMENTS, HOOK_THEME
from themehooks.hooks.registry import HookRegistry
from themehooks.kernel import build_kernel


def _make_extension(name: str):
    class _E(ExtensionBase):
        @property
        def meta(self) -> ExtensionMeta:
            return ExtensionMeta(name=name, title=name.title())

        def register_hooks(self, registry, handler):
            return None

    return _E()


# ══════════════════════════════════════════════════════════════════════════════
# 1. TestExtensionMeta
# ══════════════════════════════════════════════════════════════════════════════


class TestExtensionMeta:
    def test_is_dataclass(self):
        assert dataclasses.is_dataclass(ExtensionMeta)

    def test_defaults(self):
        meta = ExtensionMeta(name="demo", title="Demo")
        assert meta.description == ""
        assert meta.version == "1.0.0"


# ══════════════════════════════════════════════════════════════════════════════
# 2. TestExtensionBase
# ══════════════════════════════════════════════════════════════════════════════


class TestExtensionBase:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            ExtensionBase()  # type: ignore[abstract]

    def test_default_routes_empty(self):
        assert _make_extension("demo").routes() == []

    def test_default_template_dir_none_without_folder(self):
        assert _make_extension("demo").template_dir is None


# ══════════════════════════════════════════════════════════════════════════════
# 3. TestExtensionHandler
# ══════════════════════════════════════════════════════════════════════════════


class TestExtensionHandler:
    def test_install_and_lookup(self):
        handler = ExtensionHandler()
        ext = _make_extension("demo")
        handler.install(ext)
        assert handler.extension_exists("demo")
        assert handler.get("demo") is ext
        assert handler.all() == [ext]

    def test_unknown_extension(self):
        handler = ExtensionHandler()
        assert not handler.extension_exists("missing")
        assert handler.get("missing") is None

    def test_template_dirs_skip_extensions_without_templates(self):
        handler = ExtensionHandler()
        handler.install(_make_extension("demo"))
        assert handler.template_dirs() == []


# ══════════════════════════════════════════════════════════════════════════════
# 4. TestExtensionLoader
# ══════════════════════════════════════════════════════════════════════════════


class TestExtensionLoader:
    def test_available_extensions(self):
        assert set(available_extensions()) == {"class_hooks", "legacy_hooks"}

    def test_initialize_installs_in_enabled_order(self):
        registry, handler = HookRegistry(), ExtensionHandler()
        installed = initialize_extensions(registry, handler, ["legacy_hooks", "class_hooks"])
        assert [e.meta.name for e in installed] == ["legacy_hooks", "class_hooks"]
        sources = [r.source for r in registry.registrations(HOOK_THEME)]
        assert sources == ["legacy_hooks", "class_hooks"]

    def test_initialize_subset(self):
        registry, handler = HookRegistry(), ExtensionHandler()
        initialize_extensions(registry, handler, ["legacy_hooks"])
        assert not handler.extension_exists("class_hooks")
        assert registry.lookup(HOOK_PAGE_ATTACHMENTS) == ()

    def test_unknown_extension_raises(self):
        with pytest.raises(ExtensionNotFoundError):
            initialize_extensions(HookRegistry(), ExtensionHandler(), ["nope"])

    def test_installing_twice_raises_duplicate_handler(self):
        from themehooks.exceptions import DuplicateHandlerError

        registry, handler = HookRegistry(), ExtensionHandler()
        with pytest.raises(DuplicateHandlerError):
            initialize_extensions(registry, handler, ["legacy_hooks", "legacy_hooks"])


# ══════════════════════════════════════════════════════════════════════════════
# 5. TestClassHooks
# ══════════════════════════════════════════════════════════════════════════════


class TestClassHooks:
    def test_theme_hook(self):
        from themehooks.extensions.class_hooks import ThemeHook

        assert ThemeHook().theme() == {"class_template": {"variables": {"message": ""}}}

    def test_page_attachments_for_class_page(self):
        from themehooks.extensions.class_hooks import ThemeHook

        page = PageContext(route_name="class_hooks.page")
        ThemeHook().page_attachments(page)
        assert page.attachments.libraries == ["class_hooks/custom_styles"]

    def test_page_attachments_other_route(self):
        from themehooks.extensions.class_hooks import ThemeHook

        page = PageContext(route_name="legacy_hooks.page")
        ThemeHook().page_attachments(page)
        assert page.attachments.libraries == []

    def test_help_hook_uses_injected_handler(self):
        from themehooks.extensions.class_hooks import ClassHooksExtension, HelpHook

        handler = ExtensionHandler()
        hook = HelpHook(handler)
        assert hook.help(HelpContext(route_name="help.page.class_hooks")) == ""
        handler.install(ClassHooksExtension())
        assert hook.help(HelpContext(route_name="help.page.class_hooks")).startswith("<p>This module demonstrates")

    def test_help_hook_other_route(self):
        from themehooks.extensions.class_hooks import ClassHooksExtension, HelpHook

        handler = ExtensionHandler()
        handler.install(ClassHooksExtension())
        assert HelpHook(handler).help(HelpContext(route_name="help.page.legacy_hooks")) == ""

    def test_registers_three_hooks(self):
        from themehooks.extensions.class_hooks import ClassHooksExtension

        registry = HookRegistry()
        ClassHooksExtension().register_hooks(registry, ExtensionHandler())
        assert registry.hook_names() == [HOOK_THEME, HOOK_PAGE_ATTACHMENTS, HOOK_HELP]
        assert {r.source for name in registry.hook_names() for r in registry.registrations(name)} == {"class_hooks"}

    def test_controller(self):
        from themehooks.extensions.class_hooks import ClassHooksController

        descriptor = ClassHooksController().build()
        assert descriptor.template_name == "class_template"
        assert descriptor.variables["message"] == (
            "This is rendered using the class-based way of implementing theme hooks!"
        )

    def test_ships_templates(self):
        from themehooks.extensions.class_hooks import ClassHooksExtension

        template_dir = ClassHooksExtension().template_dir
        assert template_dir is not None
        assert (template_dir / "class-template.html").is_file()


# ══════════════════════════════════════════════════════════════════════════════
# 6. TestLegacyHooks
# ══════════════════════════════════════════════════════════════════════════════


class TestLegacyHooks:
    def test_theme_function(self):
        from themehooks.extensions.legacy_hooks.module import legacy_hooks_theme

        assert legacy_hooks_theme() == {"legacy_template": {"variables": {"message": ""}}}

    def test_help_function(self):
        from themehooks.extensions.legacy_hooks.module import legacy_hooks_help

        assert legacy_hooks_help(HelpContext(route_name="help.page.legacy_hooks"))
        assert legacy_hooks_help(HelpContext(route_name="help.page.class_hooks")) == ""

    def test_routes(self):
        from themehooks.extensions.legacy_hooks import LegacyHooksExtension

        (route,) = LegacyHooksExtension().routes()
        assert (route.route_id, route.path) == ("legacy_hooks.page", "/legacy-hooks")

    def test_controller(self):
        from themehooks.extensions.legacy_hooks import LegacyHooksController

        descriptor = LegacyHooksController().build()
        assert descriptor.template_name == "legacy_template"
        assert descriptor.variables["message"] == "This is rendered using the legacy way of implementing theme hooks!"

    def test_ships_templates(self):
        from themehooks.extensions.legacy_hooks import LegacyHooksExtension

        template_dir = LegacyHooksExtension().template_dir
        assert template_dir is not None
        assert (template_dir / "legacy-template.html").is_file()


# ══════════════════════════════════════════════════════════════════════════════
# 7. TestKernel
# ══════════════════════════════════════════════════════════════════════════════


class TestKernel:
    def test_registry_frozen(self, kernel):
        assert kernel.registry.frozen

    def test_handler_counts(self, kernel):
        assert len(kernel.registry.lookup(HOOK_THEME)) == 2
        assert len(kernel.registry.lookup(HOOK_HELP)) == 2
        assert len(kernel.registry.lookup(HOOK_PAGE_ATTACHMENTS)) == 1

    def test_kernel_is_immutable(self, kernel):
        with pytest.raises(dataclasses.FrozenInstanceError):
            kernel.registry = HookRegistry()  # type: ignore[misc]

    def test_routes(self, kernel):
        assert [r.route_id for r in kernel.renderer.routes] == ["class_hooks.page", "legacy_hooks.page"]

    def test_single_extension(self):
        kernel = build_kernel(Settings(enabled_extensions=["legacy_hooks"]))
        assert kernel.theme.names() == ["legacy_template"]
        assert [r.route_id for r in kernel.renderer.routes] == ["legacy_hooks.page"]

    def test_no_extensions(self):
        kernel = build_kernel(Settings(enabled_extensions=[]))
        assert len(kernel.registry) == 0
        assert kernel.dispatcher.dispatch(HOOK_HELP, HelpContext(route_name="help.page.class_hooks")) == ""

    def test_unknown_extension_aborts_startup(self):
        with pytest.raises(ExtensionNotFoundError):
            build_kernel(Settings(enabled_extensions=["class_hooks", "missing"]))
