"""
Exceptions raised by the protochain data structures.

Only one domain error exists: reading or rebuilding the head of the empty
list. It derives from IndexError so existing ``except IndexError`` handlers
(the same error the heap and array types raise on empty access) still apply.
"""


class EmptyListAccess(IndexError):
    """Raised when first/rest/replace_* is applied to the empty list."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() called on the empty list")
        self.operation = operation
