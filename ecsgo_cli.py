import logging
import sys

import click

from ecsgo.aws_sessions import AWSSessions, ProviderConfig, available_profiles
from ecsgo.checker import ConfigChecker
from ecsgo.config_loader import ConfigLoader
from ecsgo.exceptions import ECSGoError, ProcessError
from ecsgo.lister import ECSResourceLister
from ecsgo.resolver import Resolver
from ecsgo.runner import ProcessRunner
from ecsgo.selector import select_one
from ecsgo.session import ExecSession

logger = logging.getLogger("ecsgo")


def fail(message, code=1):
    click.secho(str(message), fg="red", err=True)
    sys.exit(code)


def choose_profile():
    profiles = available_profiles()
    if not profiles:
        fail("No AWS profiles found in your AWS config")
    return select_one("Select your AWS Profile", [(p, p) for p in profiles])


def connect(config):
    provider = ProviderConfig(profile=config.get("profile"), region=config.get("region"))
    with AWSSessions(provider) as aws:
        ecs = aws.ecs_client()
        target = Resolver(ECSResourceLister(ecs), logger=logger).resolve()
        click.secho(
            f"Connecting to container {target.container.name} "
            f"in task {target.task.id} on cluster {target.cluster}",
            fg="green",
        )
        session = ExecSession(
            ecs, command=config["command"], plugin=config["plugin"], logger=logger
        )
        session.connect(target, ProcessRunner(logger=logger))


@click.command(name="ecsgo")
@click.option("--profile", "-p", help="AWS profile to use")
@click.option("--region", "-r", help="AWS region to use")
@click.option(
    "--pick-profile", is_flag=True, help="Choose the AWS profile from a list"
)
@click.option("--cmd", "-c", "command", help="Command to run in the container")
@click.option(
    "--config",
    "config_path",
    envvar="ECSGO_CONFIG",
    type=click.Path(dir_okay=False),
    help="Settings file (default ~/.ecsgo.json)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(profile, region, pick_profile, command, config_path, verbose):
    """Pick a running ECS container and open an interactive session to it."""
    try:
        config = ConfigLoader(config_path).load_config(
            {"profile": profile, "region": region, "command": command}
        )
    except ECSGoError as e:
        fail(e)

    logging.basicConfig(
        level=logging.DEBUG if verbose else config["log_level"],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    checks = ConfigChecker().validate_all(config["plugin"])
    if not checks["session_manager_plugin"]:
        fail("The AWS session-manager-plugin is required.")

    try:
        if pick_profile:
            config["profile"] = choose_profile()
        connect(config)
    except ProcessError as e:
        fail(e, e.exit_status)
    except ECSGoError as e:
        fail(e)
    except KeyboardInterrupt:
        fail("Aborted", 130)


if __name__ == "__main__":
    main()
