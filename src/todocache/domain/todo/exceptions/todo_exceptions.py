class TodoError(Exception):
    pass


class TodoFetchError(TodoError):
    pass


class TodoNotFoundError(TodoError, LookupError):
    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo with id '{todo_id}' not found")
        self.todo_id = todo_id


class TodoStorageError(TodoError):
    pass
