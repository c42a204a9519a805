"""Tests for fitting responder outcomes to the served file."""

from responder.assembler import FileResponder
from responder.types import OutcomeKind
from server.responses import fit_partial_window


def test_full_outcome_is_untouched(responder, sample_file):
    outcome = responder.respond_with_file(sample_file)
    assert fit_partial_window(outcome) is outcome


def test_window_within_file_is_untouched(responder, sample_file):
    outcome = responder.respond_with_file(sample_file, {'Range': 'bytes=0-1'})
    assert fit_partial_window(outcome) is outcome


def test_window_past_end_is_cut(responder, sample_file):
    outcome = responder.respond_with_file(sample_file, {'Range': 'bytes=0-9999'})
    assert outcome.header('Content-Length') == '10000'

    fitted = fit_partial_window(outcome)

    assert fitted.kind is OutcomeKind.PARTIAL
    assert (fitted.body.start, fitted.body.end) == (0, sample_file.size - 1)
    assert fitted.header('Content-Range') == f'bytes 0-{sample_file.size - 1}/{sample_file.size}'
    assert fitted.header('Content-Length') == str(sample_file.size)


def test_reversed_window_becomes_unsatisfiable(sample_file):
    outcome = FileResponder().respond_with_file(sample_file, {'Range': 'bytes=50-10'})
    assert outcome.header('Content-Length') == '-39'

    fitted = fit_partial_window(outcome)

    assert fitted.kind is OutcomeKind.RANGE_UNSATISFIABLE
    assert fitted.status_code == 416
    assert fitted.body is None
    assert fitted.header('Content-Range') == f'bytes */{sample_file.size}'
    assert fitted.header('Content-Length') == '0'
