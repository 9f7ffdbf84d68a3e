"""
Environment configuration management.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read ELASTIC_<name>, falling back to ELASTICSEARCH_<name>."""
    return os.getenv(f"ELASTIC_{name}", os.getenv(f"ELASTICSEARCH_{name}", default))


@dataclass(frozen=True)
class ElasticConfig:
    """Connection settings for a single Elasticsearch cluster."""
    host: str = "localhost"
    port: int = 9200
    index_prefix: str = ""
    timeout_ms: int = 30000

    @property
    def host_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def index_name(self, name: str) -> str:
        """
        Resolve a logical index name to the name sent over the wire.

        Args:
            name: Logical (suffix) index name

        Returns:
            Index name with the configured prefix prepended
        """
        return f"{self.index_prefix}{name}"

    @classmethod
    def from_env(cls) -> "ElasticConfig":
        """
        Build configuration from environment variables.

        A local .env file is loaded first. Recognised variables:
        - ELASTIC_HOST (default "localhost")
        - ELASTIC_PORT (default 9200)
        - ELASTIC_INDEX_PREFIX (default "")
        - ELASTIC_TIMEOUT in milliseconds (default 30000)

        Each also accepts the ELASTICSEARCH_ spelling.
        """
        load_dotenv()
        return cls(
            host=_getenv("HOST", cls.host),
            port=int(_getenv("PORT", str(cls.port))),
            index_prefix=_getenv("INDEX_PREFIX", cls.index_prefix),
            timeout_ms=int(_getenv("TIMEOUT", str(cls.timeout_ms))),
        )


def get_elasticsearch_config() -> ElasticConfig:
    """
    Get Elasticsearch configuration.

    Returns:
        ElasticConfig read from the environment
    """
    return ElasticConfig.from_env()
