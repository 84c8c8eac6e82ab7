import logging

from .exceptions import NoClustersFound, NoContainersFound, NoTasksFound
from .models import ResolvedTarget, short_id
from .selector import select_one

default_logger = logging.getLogger(__name__)


def task_label(task):
    return f"{task.id}\t{task.definition_name} ({','.join(task.container_names)})"


class Resolver:
    """Walks cluster -> task -> container, asking the operator at each step.

    There is no going back: a failure at any stage ends the resolution and
    the operator runs the tool again.
    """

    def __init__(self, lister, prompt=None, logger=None):
        self.lister = lister
        self.prompt = prompt
        self.logger = logger or default_logger

    def _log(self, message):
        self.logger.debug(message)

    def select_cluster(self):
        cluster_arns = self.lister.list_clusters()
        if not cluster_arns:
            raise NoClustersFound()
        self._log(f"Found {len(cluster_arns)} cluster(s)")

        names = [short_id(arn) for arn in cluster_arns]
        return select_one(
            "Cluster your task resides in:",
            [(name, name) for name in names],
            prompt=self.prompt,
        )

    def select_task(self, cluster):
        task_arns = self.lister.list_running_tasks(cluster)
        if not task_arns:
            raise NoTasksFound(cluster)
        self._log(f"Found {len(task_arns)} running task(s) in {cluster}")

        tasks = self.lister.describe_tasks(cluster, task_arns)
        if not tasks:
            raise NoTasksFound(cluster)
        return select_one(
            "Task you would like to connect to:",
            [(task_label(task), task) for task in tasks],
            prompt=self.prompt,
        )

    def select_container(self, task):
        if not task.containers:
            raise NoContainersFound(task.id)
        return select_one(
            "More than one container in task, please choose the one you would like to connect to:",
            [(container.name, container) for container in task.containers],
            prompt=self.prompt,
            skip_single=True,
        )

    def resolve(self):
        cluster = self.select_cluster()
        task = self.select_task(cluster)
        container = self.select_container(task)
        self._log(f"Resolved {cluster}/{task.id}/{container.name}")
        return ResolvedTarget(cluster=cluster, task=task, container=container)
