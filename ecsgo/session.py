import json
import logging

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import ProviderError

default_logger = logging.getLogger(__name__)


class ExecSession:
    """Opens an ECS Exec session and hands it to the session-manager-plugin."""

    def __init__(
        self,
        ecs_client,
        command: str = "/bin/sh",
        plugin: str = "session-manager-plugin",
        logger=None,
    ):
        self.ecs = ecs_client
        self.command = command
        self.plugin = plugin
        self.logger = logger or default_logger

    def _log(self, message):
        self.logger.info(message)

    @staticmethod
    def ssm_target(target):
        """SSM target id for a container: ecs:<cluster>_<task_id>_<runtime_id>"""
        return f"ecs:{target.cluster}_{target.task.id}_{target.container.runtime_id}"

    def start(self, target):
        self._log(
            f"Starting ECS Exec session for {target.container.name} in task {target.task.id}"
        )
        try:
            response = self.ecs.execute_command(
                cluster=target.cluster,
                task=target.task.arn,
                container=target.container.name,
                command=self.command,
                interactive=True,
            )
        except (ClientError, BotoCoreError) as e:
            raise ProviderError(f"ECS execute_command failed: {e}")
        return response["session"]

    def plugin_args(self, target, session):
        return [
            json.dumps(session),
            self.ecs.meta.region_name,
            "StartSession",
            "",
            json.dumps({"Target": self.ssm_target(target)}),
            self.ecs.meta.endpoint_url,
        ]

    def connect(self, target, runner):
        session = self.start(target)
        self._log("Launching session-manager-plugin...")
        runner.run(self.plugin, *self.plugin_args(target, session))
