"""
Service identification for log lines.

Renders `<service>@<env>:<instance>` so lines from several replicas can be told apart.
"""

import os
from functools import lru_cache
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'accommodation-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers get a short hostname, local runs fall back to the PID
    instance = os.getenv('HOSTNAME') or socket.gethostname()
    instance_id = instance[:12] if os.getenv('HOSTNAME') else str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
