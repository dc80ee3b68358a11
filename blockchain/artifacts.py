"""
Contract Artifacts
Resolves and loads compiled hardhat artifacts by contract name
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from loguru import logger

from deployer.exceptions import ArtifactNotFoundError


@dataclass(frozen=True)
class ContractArtifact:
    """Compiled contract: bytecode plus ABI."""

    contract_name: str
    abi: List[Dict[str, Any]]
    bytecode: str
    source_name: Optional[str] = None

    @property
    def fully_qualified_name(self) -> str:
        if self.source_name:
            return f"{self.source_name}:{self.contract_name}"
        return self.contract_name

    def constructor_inputs(self) -> List[Dict[str, Any]]:
        """Declared constructor parameters (empty if no explicit constructor)"""
        for entry in self.abi:
            if entry.get('type') == 'constructor':
                return entry.get('inputs', [])
        return []


def find_artifact_path(name: str, artifacts_dir: Union[str, Path]) -> Path:
    """
    Locate the artifact JSON file for a contract

    Hardhat writes artifacts to <artifacts_dir>/<sourceName>/<ContractName>.json,
    e.g. artifacts/contracts/SSB.sol/SSB.json.

    Args:
        name: Contract name ("SSB") or fully qualified name ("contracts/SSB.sol:SSB")
        artifacts_dir: Root of the hardhat artifacts directory

    Returns:
        Path to the artifact file

    Raises:
        ArtifactNotFoundError: If no artifact or more than one artifact matches
    """
    root = Path(artifacts_dir)

    if not root.is_dir():
        raise ArtifactNotFoundError(
            f"Artifacts directory not found: {root}. Run 'npx hardhat compile' first."
        )

    if ':' in name:
        source_name, contract_name = name.rsplit(':', 1)
        path = root / source_name / f"{contract_name}.json"
        if not path.is_file():
            raise ArtifactNotFoundError(f"Artifact for contract \"{name}\" not found: {path}")
        return path

    candidates = sorted(
        path for path in root.rglob(f"{name}.json")
        if 'build-info' not in path.relative_to(root).parts
    )

    if not candidates:
        raise ArtifactNotFoundError(
            f"Artifact for contract \"{name}\" not found under {root}. "
            "Run 'npx hardhat compile' first."
        )

    if len(candidates) > 1:
        options = ', '.join(
            f"{path.parent.relative_to(root).as_posix()}:{name}" for path in candidates
        )
        raise ArtifactNotFoundError(
            f"Multiple artifacts for contract \"{name}\", use a fully qualified name: {options}"
        )

    return candidates[0]


def load_artifact(name: str, artifacts_dir: Union[str, Path]) -> ContractArtifact:
    """
    Load a deployable contract artifact

    Args:
        name: Contract name or fully qualified name
        artifacts_dir: Root of the hardhat artifacts directory

    Returns:
        ContractArtifact

    Raises:
        ArtifactNotFoundError: If the artifact is missing, malformed or not deployable
    """
    path = find_artifact_path(name, artifacts_dir)

    try:
        with open(path, 'r') as f:
            contract_json = json.load(f)
    except json.JSONDecodeError as e:
        raise ArtifactNotFoundError(f"Artifact {path} is not valid JSON: {e}") from e

    abi = contract_json.get('abi')
    bytecode = contract_json.get('bytecode')

    if abi is None or bytecode is None:
        raise ArtifactNotFoundError(f"Artifact {path} is missing abi/bytecode")

    if bytecode in ('', '0x'):
        raise ArtifactNotFoundError(
            f"Contract \"{name}\" has no bytecode (abstract contract or interface)"
        )

    artifact = ContractArtifact(
        contract_name=contract_json.get('contractName', path.stem),
        abi=abi,
        bytecode=bytecode,
        source_name=contract_json.get('sourceName'),
    )

    logger.debug(f"Loaded artifact {artifact.fully_qualified_name} from {path}")
    return artifact
