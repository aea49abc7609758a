"""Tests for provider discovery from generated Initialize* functions."""

from wire_check.discovery import discover_providers, is_initializer


class TestIsInitializer:
    def test_exact_name(self):
        assert is_initializer("Initialize")

    def test_prefix(self):
        assert is_initializer("InitializeServer")

    def test_case_sensitive(self):
        assert not is_initializer("initializeServer")
        assert not is_initializer("NewInitialize")


class TestDiscoverProviders:
    def test_direct_and_qualified_calls(self, go_parser):
        tree = go_parser.parse_source(
            "package main\n"
            "func InitializeFoo() { x := ProvideA(); y := pkg.ProvideB(x) }\n"
        )
        assert discover_providers(tree) == {"ProvideA", "ProvideB"}

    def test_only_initializer_bodies_are_scanned(self, go_parser):
        tree = go_parser.parse_source(
            "package main\n"
            "func Initialize() *App { return NewApp(store.ProvideStore()) }\n"
            "func helper() { NotAProvider() }\n"
        )
        assert discover_providers(tree) == {"NewApp", "ProvideStore"}

    def test_duplicates_collapse_across_initializers(self, go_parser):
        tree = go_parser.parse_source(
            "package main\n"
            "func InitializeA() { ProvideCfg(); ProvideA() }\n"
            "func InitializeB() { ProvideCfg(); ProvideB() }\n"
        )
        assert discover_providers(tree) == {"ProvideCfg", "ProvideA", "ProvideB"}

    def test_generated_wire_file(self, go_parser):
        tree = go_parser.parse_source(
            "// Code generated by Wire. DO NOT EDIT.\n"
            "\n"
            "//go:generate go run -mod=mod github.com/google/wire/cmd/wire\n"
            "//go:build !wireinject\n"
            "\n"
            "package server\n"
            "\n"
            "func Initialize(cfg *setting.Cfg) (*Server, error) {\n"
            "    sqlStore, err := sqlstore.ProvideService(cfg)\n"
            "    if err != nil {\n"
            "        return nil, err\n"
            "    }\n"
            "    service := users.ProvideUserService(sqlStore)\n"
            "    server, err := New(cfg, service)\n"
            "    if err != nil {\n"
            "        return nil, err\n"
            "    }\n"
            "    return server, nil\n"
            "}\n"
        )
        assert discover_providers(tree) == {"ProvideService", "ProvideUserService", "New"}

    def test_no_initializers(self, go_parser):
        tree = go_parser.parse_source("package main\nfunc main() { run() }\n")
        assert discover_providers(tree) == frozenset()

    def test_result_is_frozen(self, go_parser):
        tree = go_parser.parse_source("package main\nfunc Initialize() { A() }\n")
        assert isinstance(discover_providers(tree), frozenset)
