# tests/test_services.py
"""
SERVICE TESTS: Provider, Molecule Service, Request Gate, Exports
================================================================

The Gemini provider is exercised with a fake client exposing the same
`models.generate_content(...)` call as google-genai.
"""

import json
import logging

import pytest

from molcraft.schema import parse_molecule

from services.export_service import ExportService
from services.molecule_service import (
    BLANK_FORMULA_ERROR,
    BUSY_ERROR,
    GENERIC_ERROR,
    MoleculeService,
    RequestGate,
)
from services.provider import (
    GeminiMoleculeProvider,
    ProviderError,
    SampleMoleculeProvider,
    build_prompt,
    read_api_key,
)


class RecordingProvider:
    """Provider double that counts calls and returns or raises."""

    def __init__(self, record=None, error=None):
        self.record = record
        self.error = error
        self.formulas = []

    def generate(self, formula):
        self.formulas.append(formula)
        if self.error is not None:
            raise self.error
        return self.record


# =============================================================================
# PROVIDER
# =============================================================================

class TestGeminiProvider:

    def test_valid_response(self, fake_client_factory, water_payload):
        client = fake_client_factory(text=json.dumps(water_payload))
        provider = GeminiMoleculeProvider(client=client)

        record = provider.generate('H2O')

        assert record == parse_molecule(water_payload)
        (call,) = client.models.calls
        assert call['model'] == 'gemini-2.5-flash'
        assert '"H2O"' in call['contents']
        assert call['config'].response_mime_type == 'application/json'

    def test_empty_response(self, fake_client_factory):
        provider = GeminiMoleculeProvider(client=fake_client_factory(text=''))
        with pytest.raises(ProviderError):
            provider.generate('H2O')

    def test_malformed_json(self, fake_client_factory):
        provider = GeminiMoleculeProvider(client=fake_client_factory(text='{"formula": "H2O"'))
        with pytest.raises(ProviderError):
            provider.generate('H2O')

    def test_schema_violation(self, fake_client_factory, water_payload):
        del water_payload['molecularGeometry']
        provider = GeminiMoleculeProvider(client=fake_client_factory(text=json.dumps(water_payload)))
        with pytest.raises(ProviderError):
            provider.generate('H2O')

    def test_request_failure(self, fake_client_factory):
        provider = GeminiMoleculeProvider(client=fake_client_factory(error=ConnectionError('offline')))
        with pytest.raises(ProviderError):
            provider.generate('H2O')

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv('GEMINI_API_KEY', raising=False)
        monkeypatch.delenv('API_KEY', raising=False)
        with pytest.raises(ProviderError):
            GeminiMoleculeProvider()

    def test_custom_model(self, fake_client_factory, water_payload):
        client = fake_client_factory(text=json.dumps(water_payload))
        GeminiMoleculeProvider(client=client, model='gemini-test').generate('H2O')
        assert client.models.calls[0]['model'] == 'gemini-test'


def test_prompt_mentions_formula_and_contract():
    prompt = build_prompt('SF6')
    assert '"SF6"' in prompt
    assert 'VSEPR' in prompt
    assert '1.5 units' in prompt


def test_read_api_key_order():
    assert read_api_key({'API_KEY': 'b', 'GEMINI_API_KEY': 'a'}) == 'a'
    assert read_api_key({'API_KEY': 'b'}) == 'b'
    assert read_api_key({'GEMINI_API_KEY': ''}) is None


class TestSampleProvider:

    def test_known_formula_case_insensitive(self):
        assert SampleMoleculeProvider().generate('co2').formula == 'CO2'

    def test_unknown_formula(self):
        with pytest.raises(ProviderError):
            SampleMoleculeProvider().generate('XeF4')


# =============================================================================
# MOLECULE SERVICE
# =============================================================================

class TestMoleculeService:

    def test_success(self, water):
        service = MoleculeService(provider=RecordingProvider(record=water))
        success, record, error = service.generate('  H2O ')

        assert success
        assert record is water
        assert error == ""
        assert service.provider.formulas == ['H2O']

    @pytest.mark.parametrize("formula", ['', '   ', None])
    def test_blank_formula_never_reaches_provider(self, formula):
        provider = RecordingProvider()
        success, record, error = MoleculeService(provider=provider).generate(formula)

        assert not success
        assert record is None
        assert error == BLANK_FORMULA_ERROR
        assert provider.formulas == []

    def test_provider_failure_becomes_generic_message(self, caplog):
        service = MoleculeService(provider=RecordingProvider(error=ProviderError('boom')))

        with caplog.at_level(logging.ERROR, logger='molcraft'):
            success, record, error = service.generate('H2O')

        assert not success
        assert record is None
        assert error == "Failed to generate molecule. Please check the formula or try again."
        assert error == GENERIC_ERROR
        assert any(r.exc_info for r in caplog.records if r.levelno == logging.ERROR)

    def test_gated_rejects_while_in_flight(self, water):
        gate = RequestGate()
        held = gate.try_begin()
        service = MoleculeService(provider=RecordingProvider(record=water))

        success, record, error = service.generate_gated('H2O', gate)

        assert not success
        assert error == BUSY_ERROR
        assert service.provider.formulas == []

        gate.finish(held)
        success, record, error = service.generate_gated('H2O', gate)
        assert success
        assert not gate.in_flight

    def test_gate_released_after_failure(self):
        gate = RequestGate()
        service = MoleculeService(provider=RecordingProvider(error=ProviderError('boom')))

        service.generate_gated('H2O', gate)

        assert not gate.in_flight


class TestRequestGate:

    def test_single_in_flight(self):
        gate = RequestGate()
        token = gate.try_begin()

        assert token is not None
        assert gate.in_flight
        assert gate.try_begin() is None

        gate.finish(token)
        assert not gate.in_flight

    def test_each_request_gets_a_fresh_token(self):
        gate = RequestGate()
        first = gate.try_begin()
        gate.finish(first)
        second = gate.try_begin()

        assert second is not None
        assert second != first

    def test_gated_returns_provider_record_unchanged(self, water):
        gate = RequestGate()
        service = MoleculeService(provider=RecordingProvider(record=water))

        first = service.generate_gated('H2O', gate)
        second = service.generate_gated('H2O', gate)

        assert first == (True, water, "")
        assert second == (True, water, "")
        assert service.provider.formulas == ['H2O', 'H2O']

    def test_finishing_stale_token_keeps_gate_closed(self):
        gate = RequestGate()
        first = gate.try_begin()
        gate.finish(first)
        gate.try_begin()

        gate.finish(first)
        assert gate.in_flight


# =============================================================================
# EXPORT SERVICE
# =============================================================================

class TestExportService:

    def test_json_round_trips(self, ammonium):
        text = ExportService.generate_molecule_json(ammonium)
        assert parse_molecule(text) == ammonium
        assert json.loads(text)['atoms'][0]['charge'] == 1

    def test_lewis_svg(self, water):
        svg = ExportService.generate_lewis_svg(water)
        assert '<svg' in svg

    def test_structure_html(self, hcn):
        html = ExportService.generate_structure_html(hcn)
        assert '<html' in html
        assert 'plotly' in html.lower()

    def test_summary_text(self, water):
        text = ExportService.generate_summary_text(water)
        assert 'H2O' in text
        assert 'Lone pairs:     2' in text
        assert 'Net charge:     +0' in text
