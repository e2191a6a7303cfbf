"""数据访问层(Repository).

仅负责 Query 组装与数据库读写,不做序列化、不 commit.
"""
