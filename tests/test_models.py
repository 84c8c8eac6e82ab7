import pytest

from ecsgo.models import Container, ResolvedTarget, Task, short_id


class TestShortId:
    @pytest.mark.parametrize(
        "resource_name, expected",
        [
            ("arn:aws:ecs:eu-west-1:123456789012:cluster/prod", "prod"),
            (
                "arn:aws:ecs:eu-west-1:123456789012:task/prod/0123456789abcdef",
                "0123456789abcdef",
            ),
            ("a/b/c/d", "d"),
            ("no-slashes", "no-slashes"),
        ],
    )
    def test_returns_last_segment(self, resource_name, expected):
        assert short_id(resource_name) == expected


class TestTask:
    def test_from_description(self):
        task = Task.from_description(
            {
                "taskArn": "arn:aws:ecs:eu-west-1:123456789012:task/prod/abc123",
                "taskDefinitionArn": "arn:aws:ecs:eu-west-1:123456789012:task-definition/web:7",
                "lastStatus": "RUNNING",
                "containers": [
                    {"name": "sidecar", "runtimeId": "abc123-111"},
                    {"name": "app", "runtimeId": "abc123-222", "containerArn": "arn:c"},
                ],
            }
        )
        assert task.id == "abc123"
        assert task.definition_name == "web:7"
        assert task.last_status == "RUNNING"
        assert task.container_names == ["sidecar", "app"]
        assert task.containers[1] == Container("app", "abc123-222", "arn:c")

    def test_from_description_without_containers(self):
        task = Task.from_description({"taskArn": "arn:task/prod/abc123"})
        assert task.containers == ()
        assert task.definition_name == ""


class TestResolvedTarget:
    def setup_method(self):
        self.app = Container("app")
        self.task = Task("arn:task/prod/abc123", "web:1", (self.app,))

    def test_valid(self):
        target = ResolvedTarget("prod", self.task, self.app)
        assert target.container in target.task.containers

    def test_container_from_other_task(self):
        with pytest.raises(ValueError, match="does not belong"):
            ResolvedTarget("prod", self.task, Container("other"))

    def test_empty_cluster(self):
        with pytest.raises(ValueError, match="cluster"):
            ResolvedTarget("", self.task, self.app)

    def test_missing_task(self):
        with pytest.raises(ValueError, match="task"):
            ResolvedTarget("prod", None, self.app)
