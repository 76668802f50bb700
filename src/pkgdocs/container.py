"""Dependency injection container for pkgdocs."""

from __future__ import annotations

from dataclasses import dataclass

from pkgdocs.config import FrontendConfig
from pkgdocs.core.interfaces import TagResolverPort
from pkgdocs.frontend.documentation import DocumentationRenderer, LinkRewriter
from pkgdocs.frontend.source import SourceLocator


@dataclass(frozen=True)
class Container:
    """DI container holding the frontend helpers and their ports."""

    config: FrontendConfig
    tag_resolver: TagResolverPort
    renderer: DocumentationRenderer
    source_locator: SourceLocator

    @staticmethod
    def create_default(config: FrontendConfig) -> Container:
        """Create a container with production adapters."""
        from pkgdocs.adapters.stdlib_tags import StdlibTagResolver

        return Container._build(config, StdlibTagResolver())

    @staticmethod
    def create_for_testing(
        config: FrontendConfig | None = None,
        tag_resolver: TagResolverPort | None = None,
    ) -> Container:
        """Create a container with test/mock adapters.

        All parameters are optional. Provide a mock tag_resolver to control
        standard library tag lookups in tests.
        """
        if config is None:
            config = FrontendConfig()

        # Use a stub that raises if accidentally called without being mocked
        class StubTagResolver(TagResolverPort):
            def resolve(self, version: str) -> str:
                raise NotImplementedError("Provide a mock tag_resolver")

        return Container._build(config, tag_resolver or StubTagResolver())

    @staticmethod
    def _build(config: FrontendConfig, tag_resolver: TagResolverPort) -> Container:
        return Container(
            config=config,
            tag_resolver=tag_resolver,
            renderer=DocumentationRenderer(LinkRewriter(config.documentation_hack)),
            source_locator=SourceLocator(
                tag_resolver,
                stdlib_module_path=config.stdlib_module_path,
                repo_url=config.go_repo_url,
            ),
        )
