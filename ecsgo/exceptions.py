class ECSGoError(Exception):
    """Base class for every error the tool reports to the operator."""


class ConfigError(ECSGoError):
    pass


class ProviderError(ECSGoError):
    """An AWS call failed (network, credentials, throttling, permissions)."""


class NothingToSelect(ECSGoError):
    """A listing legitimately came back empty."""


class NoClustersFound(NothingToSelect):
    def __init__(self):
        super().__init__("No clusters found in account or region")


class NoTasksFound(NothingToSelect):
    def __init__(self, cluster):
        self.cluster = cluster
        super().__init__(f"There are no running tasks in the cluster {cluster}")


class NoContainersFound(NothingToSelect):
    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"Task {task_id} has no containers")


class SelectionCancelled(ECSGoError):
    def __init__(self, message="Selection cancelled"):
        super().__init__(message)


class ProcessError(ECSGoError):
    def __init__(self, command, returncode=None, reason=None):
        self.command = list(command)
        self.returncode = returncode
        if returncode is None:
            message = f"Unable to start {self.command[0]}: {reason}"
        elif returncode < 0:
            message = f"{self.command[0]} was terminated by signal {-returncode}"
        else:
            message = f"{self.command[0]} exited with status {returncode}"
        super().__init__(message)

    @property
    def exit_status(self):
        """Status to exit with, shell style for a child killed by a signal."""
        if not self.returncode:
            return 1
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode
