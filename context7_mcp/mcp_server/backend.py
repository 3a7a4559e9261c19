"""Documentation backends consulted by the MCP tools."""

import logging
import textwrap
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Example format for a Context7-compatible ID
PLACEHOLDER_LIBRARY_ID = "/nextjs/nextjs/v14"

DEFAULT_TOPIC = "General"

PLACEHOLDER_DOCS_TEMPLATE = textwrap.dedent(
    """\
    // Context7 documentation for {library_id}
    // Topic: {topic}
    // Example code for a Next.js App Router page:
    import {{ NextPage }} from 'next';
    const HomePage: NextPage = () => {{
      return <h1>Hello Context7!</h1>;
    }};
    export default HomePage;
    """
)


class DocumentationBackend(ABC):
    """Source of library identifiers and documentation text.

    The tools only talk to this interface; swapping in a real catalog means
    providing another implementation and passing it to ``build_registry``.
    """

    @abstractmethod
    async def lookup(self, library_name: str) -> str:
        """Resolve a general library name into a Context7-compatible ID.

        Raises:
            LibraryNotFoundError: If nothing matches ``library_name``
        """

    @abstractmethod
    async def fetch_docs(
        self,
        library_id: str,
        topic: str | None = None,
        tokens: int | None = None,
    ) -> str:
        """Return documentation text for ``library_id``.

        Args:
            library_id: Context7-compatible library ID
            topic: Optional topic to focus on
            tokens: Optional upper bound on the amount of text to return
        """


class PlaceholderBackend(DocumentationBackend):
    """Backend returning fixed example data instead of real lookups.

    Every name resolves to the same identifier, blank ones included.
    """

    def __init__(self, library_id: str = PLACEHOLDER_LIBRARY_ID):
        self.library_id = library_id

    async def lookup(self, library_name: str) -> str:
        return self.library_id

    async def fetch_docs(
        self,
        library_id: str,
        topic: str | None = None,
        tokens: int | None = None,
    ) -> str:
        if tokens is not None:
            logger.debug(f"Token limit {tokens} requested for {library_id}; not applied")
        return PLACEHOLDER_DOCS_TEMPLATE.format(
            library_id=library_id, topic=topic or DEFAULT_TOPIC
        )
