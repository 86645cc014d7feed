from dependency_injector import containers, providers

from ethinvoke.config import Settings
from ethinvoke.handler.contract import Contract
from ethinvoke.infra.http.rate_limited_client import RateLimitedClient
from ethinvoke.infra.rpc.eth_client import EthRPCClient


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    http_client = providers.Singleton(
        RateLimitedClient,
        rate_per_second=settings.provided.rpc_rate_per_second,
        timeout=settings.provided.rpc_timeout,
    )

    rpc_client = providers.Singleton(
        EthRPCClient,
        rpc_url=settings.provided.rpc_url,
        http_client=http_client,
    )

    # container.contract(abi=..., address=..., bytecode=...)
    contract = providers.Factory(
        Contract,
        client=rpc_client,
    )
