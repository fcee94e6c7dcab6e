"""
Artifact Store
Resolves compiled Hardhat artifacts by contract name
"""

import difflib
import json
from pathlib import Path
from typing import Dict, List, Optional
from loguru import logger

from .errors import ArtifactResolutionError


BUILD_INFO_DIR = "build-info"
DEBUG_SUFFIX = ".dbg.json"


class ContractArtifact:
    """Compiled contract: ABI, creation bytecode and link references"""

    def __init__(
        self,
        contract_name: str,
        source_name: str,
        abi: List[Dict],
        bytecode: str,
        link_references: Optional[Dict] = None,
        path: Optional[Path] = None
    ):
        self.contract_name = contract_name
        self.source_name = source_name
        self.abi = abi
        self.bytecode = bytecode
        self.link_references = link_references or {}
        self.path = path

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @property
    def is_deployable(self) -> bool:
        """Abstract contracts and interfaces compile to empty bytecode"""
        code = (self.bytecode or '').lower()
        return code not in ('', '0x')

    @property
    def needs_linking(self) -> bool:
        return bool(self.link_references)

    def __repr__(self):
        return f"ContractArtifact({self.fully_qualified_name!r})"


class ArtifactStore:
    """
    Reads artifacts from a Hardhat artifacts directory

    Layout: <root>/<sourceName>/<ContractName>.json, with debug files
    (*.dbg.json) and the build-info directory alongside.
    """

    def __init__(self, artifacts_dir: str = "artifacts"):
        """
        Initialize Artifact Store

        Args:
            artifacts_dir: Root of the compiled artifacts
        """
        self.root = Path(artifacts_dir)

    def read_artifact(self, name: str) -> ContractArtifact:
        """
        Load the artifact for a contract name or fully qualified name

        Args:
            name: "Token" or "contracts/Token.sol:Token"

        Returns:
            ContractArtifact
        """
        if ':' in name:
            path = self._path_for_fully_qualified_name(name)
            if not path.is_file():
                raise ArtifactResolutionError(
                    f"Artifact for contract \"{name}\" not found at {path}"
                )
            return self._load(path)

        matches = [path for path in self._artifact_files() if path.stem == name]

        if not matches:
            raise ArtifactResolutionError(self._not_found_message(name))

        if len(matches) > 1:
            candidates = "\n".join(
                f"  * {self._fully_qualified_name_for(path)}" for path in sorted(matches)
            )
            raise ArtifactResolutionError(
                f"There are multiple artifacts for contract \"{name}\", "
                f"please use a fully qualified name instead:\n{candidates}"
            )

        return self._load(matches[0])

    def artifact_exists(self, name: str) -> bool:
        """Check whether a name resolves to exactly one artifact"""
        try:
            self.read_artifact(name)
            return True
        except ArtifactResolutionError:
            return False

    def get_contract_names(self) -> List[str]:
        """Fully qualified names of every artifact under the root"""
        return sorted(
            self._fully_qualified_name_for(path) for path in self._artifact_files()
        )

    def _artifact_files(self) -> List[Path]:
        if not self.root.is_dir():
            return []

        files = []
        for path in self.root.rglob('*.json'):
            relative = path.relative_to(self.root)
            if relative.parts[0] == BUILD_INFO_DIR:
                continue
            if path.name.endswith(DEBUG_SUFFIX):
                continue
            # Artifacts always sit inside their source file's directory
            if len(relative.parts) < 2:
                continue
            files.append(path)

        return files

    def _path_for_fully_qualified_name(self, name: str) -> Path:
        source_name, _, contract_name = name.rpartition(':')
        if not source_name or not contract_name:
            raise ArtifactResolutionError(f"Invalid fully qualified name: {name}")
        return self.root / source_name / f"{contract_name}.json"

    def _fully_qualified_name_for(self, path: Path) -> str:
        source_name = path.parent.relative_to(self.root).as_posix()
        return f"{source_name}:{path.stem}"

    def _not_found_message(self, name: str) -> str:
        message = f"Artifact for contract \"{name}\" not found in {self.root}."

        known = sorted({path.stem for path in self._artifact_files()})
        suggestions = difflib.get_close_matches(name, known, n=3)
        if suggestions:
            message += " Did you mean: " + ", ".join(suggestions) + "?"
        else:
            message += " Run 'npx hardhat compile' first."

        return message

    def _load(self, path: Path) -> ContractArtifact:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ArtifactResolutionError(f"Could not read artifact {path}: {e}") from e

        if not isinstance(data, dict) or 'abi' not in data or 'bytecode' not in data:
            raise ArtifactResolutionError(f"Artifact {path} has no abi/bytecode")

        artifact = ContractArtifact(
            contract_name=data.get('contractName', path.stem),
            source_name=data.get('sourceName', path.parent.relative_to(self.root).as_posix()),
            abi=data['abi'],
            bytecode=data['bytecode'],
            link_references=data.get('linkReferences'),
            path=path
        )

        logger.debug(f"Loaded artifact {artifact.fully_qualified_name} from {path}")
        return artifact
