"""结构化日志处理器."""
