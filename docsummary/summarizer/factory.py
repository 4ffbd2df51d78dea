"""Factory for SummaryOrchestrator (shared by API and CLI)."""
from docsummary.llm.settings import LLMSettings
from docsummary.summarizer.generative import GenerativeSummarizer
from docsummary.summarizer.orchestrator import SummaryOrchestrator
from docsummary.summarizer.settings import SummarizerSettings


def create_orchestrator(llm_settings=None, settings=None, client=None):
    """Build an orchestrator; the generative summarizer is attached only when a provider is configured."""
    llm_settings = llm_settings or LLMSettings()
    settings = settings or SummarizerSettings()
    generative = None
    if llm_settings.generative_configured:
        generative = GenerativeSummarizer(
            llm_settings,
            client=client,
            max_input_chars=settings.max_input_chars,
        )
    return SummaryOrchestrator(generative=generative, settings=settings)
