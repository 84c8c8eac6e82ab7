from dataclasses import dataclass, field


def short_id(resource_name: str) -> str:
    """Return the last path segment of an ARN-like resource name."""
    return resource_name.split("/")[-1]


@dataclass(frozen=True)
class Container:
    name: str
    runtime_id: str = ""
    arn: str = ""

    @classmethod
    def from_description(cls, container: dict):
        return cls(
            name=container["name"],
            runtime_id=container.get("runtimeId", ""),
            arn=container.get("containerArn", ""),
        )


@dataclass(frozen=True)
class Task:
    arn: str
    definition_name: str
    containers: tuple = field(default_factory=tuple)
    last_status: str = ""

    @property
    def id(self) -> str:
        return short_id(self.arn)

    @property
    def container_names(self) -> list:
        return [c.name for c in self.containers]

    @classmethod
    def from_description(cls, task: dict):
        """Build a Task from one entry of an ECS DescribeTasks response."""
        return cls(
            arn=task["taskArn"],
            definition_name=short_id(task.get("taskDefinitionArn", "")),
            containers=tuple(
                Container.from_description(c) for c in task.get("containers", [])
            ),
            last_status=task.get("lastStatus", ""),
        )


@dataclass(frozen=True)
class ResolvedTarget:
    """The (cluster, task, container) triple an exec session is opened against."""

    cluster: str
    task: Task
    container: Container

    def __post_init__(self):
        if not self.cluster:
            raise ValueError("ResolvedTarget requires a cluster name")
        if self.task is None or not self.task.arn:
            raise ValueError("ResolvedTarget requires a task")
        if self.container not in self.task.containers:
            raise ValueError(
                f"Container {self.container.name!r} does not belong to task {self.task.id}"
            )
