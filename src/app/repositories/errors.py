class DuplicateEntryError(Exception):
    """Raised by repositories when a write violates a uniqueness constraint"""

    def __init__(self, constraint: str):
        self.constraint = constraint
        super().__init__(f"Duplicate entry violates {constraint}")
