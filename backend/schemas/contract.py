from pydantic import BaseModel
from typing import Optional


class ContractDealContext(BaseModel):
    platform: Optional[str] = None
    deal_type: Optional[str] = None
    offered_rate: Optional[float] = None


class ContractScanInput(BaseModel):
    contract_text: str
    deal_context: Optional[ContractDealContext] = None
    creator_name: Optional[str] = None


class ContractCategoryAnalysis(BaseModel):
    score: int
    status: str  # "complete", "partial", "missing"
    findings: list[str] = []


class ContractCategories(BaseModel):
    payment: ContractCategoryAnalysis
    content_rights: ContractCategoryAnalysis
    exclusivity: ContractCategoryAnalysis
    legal: ContractCategoryAnalysis


class FoundClause(BaseModel):
    category: str
    item: str
    quote: str
    assessment: str  # "good", "neutral", "red_flag"
    note: Optional[str] = None


class MissingClause(BaseModel):
    category: str
    item: str
    importance: str  # "critical", "important", "optional"
    suggestion: str


class ContractScanRedFlag(BaseModel):
    severity: str  # "high", "medium", "low"
    clause: str
    quote: Optional[str] = None
    explanation: str
    suggestion: str


class ContractScanResult(BaseModel):
    health_score: int
    health_level: str
    categories: ContractCategories
    found_clauses: list[FoundClause] = []
    missing_clauses: list[MissingClause] = []
    red_flags: list[ContractScanRedFlag] = []
    recommendations: list[str] = []
    deal_context: list[str] = []
    change_request_template: str = ""


class ContractChecklistItem(BaseModel):
    id: str
    category: str
    term: str
    explanation: str
    recommendation: str
    priority: str
    applicable: bool = True
    highlighted: bool = False


class ContractRedFlag(BaseModel):
    id: str
    flag: str
    reason: str
    action: str
    severity: str
    detected: bool = False


class ContractChecklistSummary(BaseModel):
    total_items: int
    critical_items: int
    highlighted_items: int
    detected_red_flags: int


class ContractChecklist(BaseModel):
    items: list[ContractChecklistItem]
    red_flags: list[ContractRedFlag]
    summary: ContractChecklistSummary
    by_category: dict[str, int]
    deal_notes: list[str]
