"""
Configuration management for the Elasticsearch client.
"""

from .environments import ElasticConfig, get_elasticsearch_config

__all__ = [
    "ElasticConfig",
    "get_elasticsearch_config",
]
