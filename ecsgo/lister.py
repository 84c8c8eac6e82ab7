from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import ProviderError
from .models import Task

# DescribeTasks accepts at most 100 task ids per call
DESCRIBE_BATCH_SIZE = 100


class ECSResourceLister:
    """Read-only queries against ECS. Every call is a fresh round trip."""

    def __init__(self, ecs_client):
        self.ecs = ecs_client

    def _paginate(self, operation, key, **kwargs):
        try:
            paginator = self.ecs.get_paginator(operation)
            items = []
            for page in paginator.paginate(**kwargs):
                items.extend(page.get(key, []))
            return items
        except (ClientError, BotoCoreError) as e:
            raise ProviderError(f"ECS {operation} failed: {e}")

    def list_clusters(self):
        return self._paginate("list_clusters", "clusterArns")

    def list_running_tasks(self, cluster):
        return self._paginate(
            "list_tasks", "taskArns", cluster=cluster, desiredStatus="RUNNING"
        )

    def describe_tasks(self, cluster, task_ids):
        if not task_ids:
            raise ValueError("describe_tasks needs at least one task id")

        tasks = {}
        for start in range(0, len(task_ids), DESCRIBE_BATCH_SIZE):
            batch = list(task_ids[start : start + DESCRIBE_BATCH_SIZE])
            try:
                response = self.ecs.describe_tasks(cluster=cluster, tasks=batch)
            except (ClientError, BotoCoreError) as e:
                raise ProviderError(f"ECS describe_tasks failed: {e}")
            for description in response.get("tasks", []):
                task = Task.from_description(description)
                tasks[task.arn] = task

        # Tasks that stopped between listing and describing are reported as
        # failures by ECS and are simply absent here.
        return [tasks[arn] for arn in task_ids if arn in tasks]
