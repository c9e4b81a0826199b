"""Pure, synchronous advisory engine: no I/O, no session state."""

from app.engine.classifier import DataUnavailable, classify, classify_or_fallback, fallback_crop
from app.engine.fertilizer import plan
from app.engine.market import rank_profitability
from app.engine.orchestrator import AdvisoryOrchestrator, CropDatasetSource, StaticCropDataset
from app.engine.profit import analyze, profit_defaults
from app.engine.scorer import ConfidenceScorer, score
from app.engine.weather import farming_alerts, simulate_forecast

__all__ = [
	"AdvisoryOrchestrator",
	"ConfidenceScorer",
	"CropDatasetSource",
	"DataUnavailable",
	"StaticCropDataset",
	"analyze",
	"classify",
	"classify_or_fallback",
	"fallback_crop",
	"farming_alerts",
	"plan",
	"profit_defaults",
	"rank_profitability",
	"score",
	"simulate_forecast",
]
