class RegistryLookupError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class TaskNotFoundError(RegistryLookupError):
    def __init__(self, name: str):
        super().__init__(f"Task '{name}' does not exist!")
        self.name = name


class PipelineNotFoundError(RegistryLookupError):
    def __init__(self, name: str):
        super().__init__(f"Pipeline '{name}' does not exist!")
        self.name = name
