"""
Pydantic models for API response schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class DescriptorResponse(BaseModel):
    """Descriptor map returned by /descriptors.

    Field order is the serialized key order.
    """

    model_config = ConfigDict(extra="forbid")

    ClogP: float = Field(..., description="Crippen log partition coefficient")
    ExactMW: float = Field(..., description="Exact molecular weight")
    NumHBA: float = Field(..., description="Hydrogen-bond acceptor count")
    NumHBD: float = Field(..., description="Hydrogen-bond donor count")
    NumHeavyAtoms: float = Field(..., description="Heavy atom count")
    NumRings: float = Field(..., description="Ring count")
    NumRotatableBonds: float = Field(..., description="Rotatable bond count")
    TPSA: float = Field(..., description="Topological polar surface area")
