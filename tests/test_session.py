import json
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from ecsgo.exceptions import ProviderError
from ecsgo.models import Container, ResolvedTarget, Task
from ecsgo.session import ExecSession


class TestExecSession:
    def setup_method(self):
        self.ecs = MagicMock()
        self.ecs.meta.region_name = "us-east-1"
        self.ecs.meta.endpoint_url = "https://ecs.us-east-1.amazonaws.com"
        self.ecs.execute_command.return_value = {
            "session": {"sessionId": "ecs-execute-command-1", "tokenValue": "t"}
        }
        app = Container("app", runtime_id="abc123-2531612879")
        task = Task("arn:aws:ecs:us-east-1:123456789012:task/prod/abc123", "web:1", (app,))
        self.target = ResolvedTarget("prod", task, app)

    def test_ssm_target(self):
        assert ExecSession.ssm_target(self.target) == "ecs:prod_abc123_abc123-2531612879"

    def test_start(self):
        session = ExecSession(self.ecs, command="/bin/bash").start(self.target)
        assert session["sessionId"] == "ecs-execute-command-1"
        self.ecs.execute_command.assert_called_once_with(
            cluster="prod",
            task="arn:aws:ecs:us-east-1:123456789012:task/prod/abc123",
            container="app",
            command="/bin/bash",
            interactive=True,
        )

    def test_start_provider_error(self):
        self.ecs.execute_command.side_effect = ClientError(
            {"Error": {"Code": "InvalidParameterException", "Message": "exec disabled"}},
            "ExecuteCommand",
        )
        with pytest.raises(ProviderError, match="exec disabled"):
            ExecSession(self.ecs).start(self.target)

    def test_plugin_args(self):
        args = ExecSession(self.ecs).plugin_args(self.target, {"sessionId": "s"})
        assert json.loads(args[0]) == {"sessionId": "s"}
        assert args[1:4] == ["us-east-1", "StartSession", ""]
        assert json.loads(args[4]) == {"Target": "ecs:prod_abc123_abc123-2531612879"}
        assert args[5] == "https://ecs.us-east-1.amazonaws.com"

    def test_connect_runs_plugin(self):
        runner = MagicMock()
        ExecSession(self.ecs, plugin="/opt/smp").connect(self.target, runner)
        args, _ = runner.run.call_args
        assert args[0] == "/opt/smp"
        assert json.loads(args[1])["sessionId"] == "ecs-execute-command-1"

    def test_connect_does_not_run_plugin_on_error(self):
        self.ecs.execute_command.side_effect = ClientError(
            {"Error": {"Code": "AccessDeniedException", "Message": "denied"}},
            "ExecuteCommand",
        )
        runner = MagicMock()
        with pytest.raises(ProviderError):
            ExecSession(self.ecs).connect(self.target, runner)
        runner.run.assert_not_called()
