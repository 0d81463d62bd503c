"""takehome — take-home pay after federal, state and payroll taxes."""

__version__ = "0.4.0"

from takehome.analytics.jurisdictions import JurisdictionRanking as JurisdictionRanking
from takehome.analytics.jurisdictions import rank_jurisdictions as rank_jurisdictions
from takehome.config.defaults import default_input as default_input
from takehome.config.schema import CalculationInput as CalculationInput
from takehome.config.schema import TaxDataConfig as TaxDataConfig
from takehome.core.engine import CalculationResult as CalculationResult
from takehome.core.engine import ScenarioComparison as ScenarioComparison
from takehome.core.engine import TaxCalculationEngine as TaxCalculationEngine
from takehome.core.engine import calculate as calculate
from takehome.core.engine import compare_scenarios as compare_scenarios
from takehome.core.timeframe import Timeframe as Timeframe
from takehome.core.timeframe import TimeframeConverter as TimeframeConverter
from takehome.core.timeframe import TimeframeIncome as TimeframeIncome
from takehome.models.filing_status import FilingStatus as FilingStatus
from takehome.models.household import calculate_split as calculate_split
from takehome.models.jurisdiction import Jurisdiction as Jurisdiction
from takehome.taxes.base import TaxDataProvider as TaxDataProvider
from takehome.taxes.embedded import EmbeddedTaxData as EmbeddedTaxData
