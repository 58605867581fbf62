from uuid import uuid4


def generate_id() -> str:
    """Store-assigned document id"""
    return uuid4().hex
