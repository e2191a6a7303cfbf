"""基础设施层(请求上下文、日志中间件)."""
