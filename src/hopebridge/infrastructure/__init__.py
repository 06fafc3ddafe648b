"""
基础设施层：LLM Provider 与会话事件日志。
"""
