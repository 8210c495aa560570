from .youtube import OEmbedResponse, VideoReference, VideoInfo, SummaryResult
from .api import SummarizeRequest, SummaryDisplay, TickerDisplay
from .ticker import PriceQuote, PriceSample, HistorySnapshot
from .proxy import RelayProxy
from .enums import UrlKind, RelayMode
