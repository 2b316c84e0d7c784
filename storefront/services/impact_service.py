from typing import Dict, List, Optional
from ..db.session import get_session
from ..models.impact_metrics import ImpactMetrics
from ..models.supply_chain_step import SupplyChainStep
from ..utils.dto import to_impact_dto, to_supply_chain_dto


# Figures shown before any metrics row has been recorded.
DEFAULT_IMPACT_METRICS: Dict = {
    "id": "default",
    "schools_built": 15,
    "families_supported": 2847,
    "hectares_protected": 12000,
    "amount_reinvested": "1250000.00",
    "research_papers": 127,
    "clinical_trials": 23,
    "patents": 8,
}


class ImpactService:
    """Community-impact metrics and supply-chain steps."""

    def __init__(self, session_factory=get_session):
        self._session_factory = session_factory

    def get_impact_metrics(self) -> Dict:
        with self._session_factory() as session:
            row = session.query(ImpactMetrics).first()
            return to_impact_dto(row) if row else dict(DEFAULT_IMPACT_METRICS)

    def list_supply_chain_steps(self) -> List[Dict]:
        with self._session_factory() as session:
            rows = session.query(SupplyChainStep).order_by(SupplyChainStep.step_number.asc()).all()
            return [to_supply_chain_dto(r) for r in rows]

    def get_supply_chain_step(self, step_id: str) -> Optional[Dict]:
        if not step_id:
            return None
        with self._session_factory() as session:
            row = session.query(SupplyChainStep).filter(SupplyChainStep.id == step_id).first()
            return to_supply_chain_dto(row) if row else None
