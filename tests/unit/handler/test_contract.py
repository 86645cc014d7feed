"""Tests for Contract — ABI lookups, invocation creation and RPC-backed dispatch."""

from unittest.mock import AsyncMock

import pytest
from eth_abi import encode

from ethinvoke.domain.enums import BlockTag
from ethinvoke.exceptions import ContractNotDeployed, InvalidConfiguration
from ethinvoke.handler.contract import Contract
from ethinvoke.infra.rpc.eth_client import EthRPCClient
from ethinvoke.invocation import ConstructorInvocation, NonPayableInvocation, PayableInvocation, ReadInvocation

CONTRACT = "0x1111111111111111111111111111111111111111"
HOLDER = "0x2222222222222222222222222222222222222222"
SENDER = "0x3333333333333333333333333333333333333333"
RECIPIENT = "0xabc0000000000000000000000000000000000def"
BYTECODE = "0x6080604052"
TX_HASH = "0x" + "cd" * 32


@pytest.fixture()
def client():
    return AsyncMock(spec=EthRPCClient)


@pytest.fixture()
def token(client, erc20_abi):
    return Contract(client, erc20_abi, address=CONTRACT, bytecode=BYTECODE)


class TestConstruction:
    def test_checksums_address(self, client, erc20_abi):
        lower = "0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"
        contract = Contract(client, erc20_abi, address=lower)
        assert contract.address == "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

    def test_invalid_address(self, client, erc20_abi):
        with pytest.raises(InvalidConfiguration):
            Contract(client, erc20_abi, address="0x1234")

    def test_undeployed_has_no_address(self, client, erc20_abi):
        assert Contract(client, erc20_abi).address is None

    def test_at_rebinds(self, token):
        other = token.at(HOLDER)
        assert other.address == HOLDER
        assert token.address == CONTRACT
        assert other.abi is token.abi


class TestInvoke:
    def test_kinds_follow_mutability(self, token):
        assert isinstance(token.invoke("balanceOf", HOLDER), ReadInvocation)
        assert isinstance(token.invoke("transfer", RECIPIENT, 1), NonPayableInvocation)
        assert isinstance(token.invoke("deposit"), PayableInvocation)

    def test_by_signature(self, token):
        inv = token.invoke("transfer(address,uint256)", RECIPIENT, 1)
        assert inv.method.name == "transfer"

    def test_unknown_function(self, token):
        with pytest.raises(InvalidConfiguration):
            token.invoke("mint", HOLDER, 1)

    def test_invocation_dispatches_through_contract(self, token):
        assert token.invoke("totalSupply").handler is token

    def test_transfer_transaction(self, token):
        tx = token.invoke("transfer", RECIPIENT, 1000).create_transaction(SENDER)
        assert tx.to == CONTRACT
        assert tx.value is None
        assert tx.data.startswith("0xa9059cbb")


class TestCall:
    async def test_decodes_named_output(self, token, client):
        client.call.return_value = "0x" + encode(["uint256"], [1000]).hex()
        result = await token.invoke("balanceOf", HOLDER).call()
        assert result == {"balance": 1000}

        call, block = client.call.await_args[0]
        assert call.to == CONTRACT
        assert block == BlockTag.LATEST

    async def test_unnamed_output(self, token, client):
        client.call.return_value = "0x" + encode(["uint256"], [5]).hex()
        assert await token.invoke("totalSupply").call(block=123) == {"0": 5}
        assert client.call.await_args[0][1] == 123

    async def test_undeployed_contract(self, client, erc20_abi):
        contract = Contract(client, erc20_abi)
        with pytest.raises(ContractNotDeployed):
            await contract.invoke("totalSupply").call()
        client.call.assert_not_awaited()


class TestSendAndEstimate:
    async def test_send_uses_send_transaction(self, token, client):
        client.send_transaction.return_value = TX_HASH
        assert await token.invoke("deposit").send(SENDER, value=10) == TX_HASH
        tx = client.send_transaction.await_args[0][0]
        assert tx.value == 10
        assert tx.to == CONTRACT

    async def test_estimate_gas(self, token, client):
        client.estimate_gas.return_value = 51_000
        assert await token.invoke("transfer", RECIPIENT, 1).estimate_gas(from_address=SENDER) == 51_000


class TestDeploy:
    def test_deploy_builds_constructor(self, token):
        inv = token.deploy("Token", 1000)
        assert isinstance(inv, ConstructorInvocation)
        assert inv.encode_abi().startswith(BYTECODE)
        assert inv.payable is False

    def test_deploy_without_bytecode(self, client, erc20_abi):
        with pytest.raises(InvalidConfiguration):
            Contract(client, erc20_abi).deploy("Token", 1000)

    async def test_deploy_from_undeployed_contract(self, client, erc20_abi):
        client.send_transaction.return_value = TX_HASH
        contract = Contract(client, erc20_abi, bytecode=BYTECODE)
        assert await contract.deploy("Token", 1000).send(SENDER) == TX_HASH
        assert client.send_transaction.await_args[0][0].to is None
