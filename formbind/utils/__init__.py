"""formbind 通用工具."""
