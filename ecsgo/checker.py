import subprocess


class ConfigChecker:
    @staticmethod
    def check_session_manager_plugin(plugin="session-manager-plugin"):
        """Check if session-manager-plugin is installed and accessible."""
        try:
            subprocess.run(
                [plugin, "--version"],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
            )
            return True
        except (subprocess.CalledProcessError, FileNotFoundError, PermissionError):
            return False

    def validate_all(self, plugin="session-manager-plugin"):
        """Perform all pre-flight checks."""
        results = {
            "session_manager_plugin": self.check_session_manager_plugin(plugin),
        }
        return results
