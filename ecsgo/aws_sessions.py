import logging
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import ProviderError


@dataclass(frozen=True)
class ProviderConfig:
    profile: Optional[str] = None
    region: Optional[str] = None


def available_profiles():
    """Profile names from the shared AWS config and credentials files."""
    try:
        return boto3.Session().available_profiles
    except BotoCoreError as e:
        raise ProviderError(f"Unable to read AWS profiles: {e}")


class AWSSessions:
    """Owns the boto3 session and clients for one run of the tool.

    Use as a context manager: entering creates the session and checks the
    credentials, leaving closes every client handed out.
    """

    def __init__(self, config: ProviderConfig):
        # This is put here due to https://github.com/boto/botocore/issues/1841
        boto3.set_stream_logger(name="botocore.credentials", level=logging.ERROR)

        self.config = config
        self.session = None
        self.clients = {}

    def create_session(self):
        kwargs = {}
        if self.config.profile:
            kwargs["profile_name"] = self.config.profile
        if self.config.region:
            kwargs["region_name"] = self.config.region
        try:
            session = boto3.Session(**kwargs)
            sts = session.client("sts")
            try:
                sts.get_caller_identity()
            finally:
                sts.close()
            return session
        except (BotoCoreError, ClientError) as e:
            profile = self.config.profile or "default"
            raise ProviderError(
                f"Failed to create AWS session with profile '{profile}': {e}"
            )

    def client(self, service_name):
        if self.session is None:
            raise RuntimeError("AWSSessions must be entered before creating clients")
        if service_name not in self.clients:
            try:
                self.clients[service_name] = self.session.client(service_name)
            except BotoCoreError as e:
                raise ProviderError(f"Unable to create {service_name} client: {e}")
        return self.clients[service_name]

    def ecs_client(self):
        return self.client("ecs")

    @property
    def region(self):
        return self.ecs_client().meta.region_name

    @property
    def endpoint(self):
        return self.ecs_client().meta.endpoint_url

    def __enter__(self):
        self.session = self.create_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        while self.clients:
            _, client = self.clients.popitem()
            client.close()
        self.session = None
