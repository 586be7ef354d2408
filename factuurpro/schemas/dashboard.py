from pydantic import BaseModel


class DashboardSummary(BaseModel):
    total_invoices: int
    total_customers: int
    amount_to_be_paid: float
    amount_paid: float
    unassigned_item_count: int
    unassigned_item_total: float
