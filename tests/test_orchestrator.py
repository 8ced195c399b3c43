import asyncio
import threading
from unittest.mock import AsyncMock, patch

import pytest

from truthlens.core.config import config
from truthlens.core.errors import AnalysisNotFoundError
from truthlens.core.models import AnalysisInput
from truthlens.core.store import MemoryResultStore
from truthlens.services import orchestrator as orchestrator_module
from truthlens.services.orchestrator import AnalysisOrchestrator


def test_demo_is_seeded(orchestrator):
    demo = orchestrator.get("demo")

    assert demo.credibility_score.overall == 35
    assert demo.credibility_score.source_authority == 25
    assert demo.credibility_score.fact_verification == 40
    assert demo.credibility_score.language_analysis == 67
    assert [c.status for c in demo.fact_checks] == ["FALSE", "PARTIAL", "TRUE"]
    assert demo.processing_time == 2340


def test_run_stores_result(orchestrator, store):
    result = asyncio.run(orchestrator.run(AnalysisInput(content="Council approves budget.", type="text")))

    assert store.get(result.id) is result
    assert orchestrator.get(result.id) is result


def test_unknown_id_raises(orchestrator):
    with pytest.raises(AnalysisNotFoundError) as excinfo:
        orchestrator.get("analysis_0_missing")

    assert excinfo.value.analysis_id == "analysis_0_missing"


@patch("truthlens.services.orchestrator.asyncio.sleep", new_callable=AsyncMock)
def test_artificial_delay(mock_sleep, agent):
    orchestrator = AnalysisOrchestrator(store=MemoryResultStore(), agent=agent, delay=1.0)
    asyncio.run(orchestrator.run(AnalysisInput(content="Council approves budget.", type="text")))

    mock_sleep.assert_awaited_once_with(1.0)


@patch("truthlens.services.orchestrator.asyncio.sleep", new_callable=AsyncMock)
def test_no_delay_by_default(mock_sleep, orchestrator):
    asyncio.run(orchestrator.run(AnalysisInput(content="Council approves budget.", type="text")))

    mock_sleep.assert_not_awaited()


def test_get_orchestrator_builds_once(monkeypatch):
    monkeypatch.setattr(orchestrator_module, "_orchestrator", None)
    monkeypatch.setattr(config, "RESULT_STORE_BACKEND", "memory")
    monkeypatch.setattr(config, "SCORING_SEED", 7)

    first = orchestrator_module.get_orchestrator()
    second = orchestrator_module.get_orchestrator()

    assert first is second
    assert isinstance(first.store, MemoryResultStore)
    assert first.get("demo").id == "demo"


def test_seeded_orchestrators_agree(monkeypatch):
    monkeypatch.setattr(config, "RESULT_STORE_BACKEND", "memory")
    monkeypatch.setattr(config, "SCORING_SEED", 7)
    analysis_input = AnalysisInput(content="https://example.com/health/report", type="url")

    first = asyncio.run(orchestrator_module.build_orchestrator().run(analysis_input))
    second = asyncio.run(orchestrator_module.build_orchestrator().run(analysis_input))

    assert first.credibility_score == second.credibility_score
    assert first.sources == second.sources


def test_store_write_happens_off_the_event_loop_thread(agent):
    write_threads = []

    class RecordingStore(MemoryResultStore):
        def put(self, result):
            write_threads.append(threading.get_ident())
            super().put(result)

    async def run_and_report_loop_thread(orchestrator):
        await orchestrator.run(AnalysisInput(content="Council approves budget.", type="text"))
        return threading.get_ident()

    orchestrator = AnalysisOrchestrator(store=RecordingStore(), agent=agent)
    seed_thread = write_threads.pop()
    loop_thread = asyncio.run(run_and_report_loop_thread(orchestrator))

    assert seed_thread == loop_thread
    assert write_threads and write_threads[0] != loop_thread
