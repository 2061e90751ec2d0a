"""Options dataclass for contract generation."""

from dataclasses import dataclass


DEFAULT_TEMPLATE = "./contracts/MerkleDistributor.template"
DEFAULT_OUTPUT = "./contracts/MerkleDistributor.sol"
DEFAULT_NETWORK = "mainnet"


@dataclass(frozen=True)
class GenerateOpts:
    """All options for generating a contract from its template."""

    template: str = DEFAULT_TEMPLATE
    output: str = DEFAULT_OUTPUT
    network: str = DEFAULT_NETWORK
    strict: bool = False

    def bindings(self) -> dict[str, str]:
        """Variables available to the template."""
        return {"network": self.network}
