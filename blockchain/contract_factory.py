"""
Contract Factory
Builds, signs and broadcasts deployment transactions and tracks them until mined
"""

import asyncio
from typing import Any, Dict, Optional
from web3 import Web3
from web3.exceptions import TransactionNotFound
from loguru import logger

from deployer.exceptions import DeploymentFailure, TransactionRevertedError
from .artifacts import ContractArtifact


class DeploymentHandle:
    """
    A submitted deployment transaction

    address and receipt stay None until deployed() observes the receipt.
    """

    def __init__(
        self,
        w3: Web3,
        contract_name: str,
        transaction_hash: bytes,
        poll_interval: float = 2.0
    ):
        self.w3 = w3
        self.contract_name = contract_name
        self.transaction_hash = transaction_hash
        self.poll_interval = poll_interval

        self.receipt: Optional[Dict[str, Any]] = None
        self.address: Optional[str] = None

    @property
    def confirmed(self) -> bool:
        return self.receipt is not None

    async def deployed(self) -> "DeploymentHandle":
        """
        Wait until the deployment transaction is mined

        Polls for the receipt with no timeout: if the transaction is never
        mined this coroutine never returns.

        Returns:
            self, with receipt and address populated

        Raises:
            TransactionRevertedError: If the constructor reverted
        """
        if self.confirmed:
            return self

        logger.info(f"Waiting for confirmation of {_hex(self.transaction_hash)}...")

        while True:
            try:
                receipt = self.w3.eth.get_transaction_receipt(self.transaction_hash)
            except TransactionNotFound:
                receipt = None

            if receipt is not None:
                break

            await asyncio.sleep(self.poll_interval)

        if receipt['status'] != 1:
            raise TransactionRevertedError(
                f"Deployment of {self.contract_name} reverted "
                f"(tx {_hex(self.transaction_hash)}, block {receipt.get('blockNumber')})"
            )

        self.receipt = receipt
        self.address = receipt['contractAddress']

        logger.success(f"{self.contract_name} confirmed in block {receipt.get('blockNumber')}")
        logger.debug(f"Gas used: {receipt.get('gasUsed')}")
        return self


class ContractFactory:
    """
    Deploys new instances of one compiled contract
    """

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        signer=None,
        sender: Optional[str] = None,
        chain_id: Optional[int] = None,
        poll_interval: float = 2.0
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Compiled contract to deploy
            signer: eth_account LocalAccount (None = send from an unlocked node account)
            sender: Unlocked node account used when there is no signer
            chain_id: Chain id for signed transactions (None = ask the node)
            poll_interval: Seconds between receipt polls
        """
        self.w3 = w3
        self.artifact = artifact
        self.signer = signer
        self.sender = signer.address if signer is not None else sender
        self.chain_id = chain_id
        self.poll_interval = poll_interval

        self.contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    async def deploy(self, *args) -> DeploymentHandle:
        """
        Submit a deployment transaction

        Constructor arguments are passed positionally, unvalidated.

        Returns:
            DeploymentHandle in the submitted state

        Raises:
            DeploymentFailure: If there is no account to send from
        """
        if self.sender is None:
            raise DeploymentFailure(
                "No signer: set DEPLOYER_PRIVATE_KEY or use a node with unlocked accounts"
            )

        inputs = self.artifact.constructor_inputs()
        for index, value in enumerate(args):
            name = inputs[index].get('name') if index < len(inputs) else f"arg{index}"
            logger.info(f"  {name}: {value}")

        constructor = self.contract.constructor(*args)

        if self.signer is not None:
            tx_hash = self._send_signed(constructor)
        else:
            logger.info(f"Deploying {self.artifact.contract_name} from node account {self.sender}")
            tx_hash = constructor.transact({'from': self.sender})

        logger.info(f"Transaction sent: {_hex(tx_hash)}")

        return DeploymentHandle(
            self.w3,
            self.artifact.contract_name,
            tx_hash,
            poll_interval=self.poll_interval
        )

    def _send_signed(self, constructor) -> bytes:
        """Build, sign and broadcast the constructor transaction"""
        sender = self.signer.address
        logger.info(f"Deploying {self.artifact.contract_name} from {sender}")

        chain_id = self.chain_id if self.chain_id is not None else self.w3.eth.chain_id

        transaction = constructor.build_transaction({
            'from': sender,
            'nonce': self.w3.eth.get_transaction_count(sender, 'pending'),
            'chainId': chain_id
        })

        signed_tx = self.signer.sign_transaction(transaction)
        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)


def _hex(tx_hash) -> str:
    if isinstance(tx_hash, (bytes, bytearray)):
        return Web3.to_hex(tx_hash)
    return str(tx_hash)
