"""End-to-end tests for the verification pipeline."""

import io

from jclec.models import Component, VerificationStatus
from jclec.pipeline import ClassVerificationPipeline
from jclec.resolver import ArtifactResolver, RemoteRepository
from jclec.search import CentralSearchClient
from jclec.verifier import ArtifactVerifier

SEARCH_URL = "https://search.example.org/select"
CENTRAL = RemoteRepository("central", "https://repo.example.org/maven2/")


class RecordingResolver(ArtifactResolver):
    """Resolver that remembers which coordinates it was asked for."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.requested = []

    def resolve(self, coordinates):
        self.requested.append(str(coordinates))
        return super().resolve(coordinates)


def _pipeline(local_repo, session):
    resolver = RecordingResolver(local_repo, [CENTRAL], session=session)
    search = CentralSearchClient(base_url=SEARCH_URL, session=session)
    out = io.StringIO()
    return ClassVerificationPipeline(ArtifactVerifier(resolver, search), out=out), resolver, out


def _search_body(*ids):
    docs = ", ".join('{"id": "%s"}' % i for i in ids)
    return '{"response": {"numFound": %d, "docs": [%s]}}' % (len(ids), docs)


def test_class_found_skips_search(local_repo, fake_session, jar_builder):
    """Test a class present in the artifact is reported without searching."""
    jar_builder(local_repo / "g/a/1.0/a-1.0.jar", ["com/foo/Bar.class"])
    pipeline, _, out = _pipeline(local_repo, fake_session)

    checks = pipeline.run([Component("X", "g:a:1.0", ["com.foo.Bar"])])

    assert out.getvalue() == (
        "\nVerifying component: X\n"
        "  Checking class: com.foo.Bar\n"
        "  ✓ Class found in g:a:1.0\n"
    )
    assert checks[0].found_in_artifact
    assert not checks[0].searched
    assert SEARCH_URL not in fake_session.urls


def test_class_missing_falls_back_to_search(local_repo, fake_session, make_response, jar_builder):
    jar_builder(local_repo / "g/a/1.0/a-1.0.jar", ["com/foo/Other.class"])
    fake_session.routes[SEARCH_URL] = make_response(200, _search_body("com.foo:bar:2.0", "com.foo:bar:2.1"))
    pipeline, _, out = _pipeline(local_repo, fake_session)

    checks = pipeline.run([Component("X", "g:a:1.0", ["com.foo.Bar"])])

    assert out.getvalue() == (
        "\nVerifying component: X\n"
        "  Checking class: com.foo.Bar\n"
        "  ✗ Class not found in g:a:1.0\n"
        "  Searching for class in Maven Central...\n"
        "  Found in the following artifacts:\n"
        "    - com.foo:bar:2.0\n"
        "    - com.foo:bar:2.1\n"
    )
    assert checks[0].verification.status == VerificationStatus.NOT_FOUND
    assert checks[0].search_results == ["com.foo:bar:2.0", "com.foo:bar:2.1"]


def test_class_missing_and_search_empty(local_repo, fake_session, make_response, jar_builder):
    jar_builder(local_repo / "g/a/1.0/a-1.0.jar", [])
    fake_session.routes[SEARCH_URL] = make_response(200, _search_body())
    pipeline, _, out = _pipeline(local_repo, fake_session)

    pipeline.run([Component("X", "g:a:1.0", ["com.foo.Bar"])])

    assert out.getvalue().endswith("  Not found in Maven Central search\n")


def test_no_coordinates_goes_straight_to_search(local_repo, fake_session, make_response):
    fake_session.routes[SEARCH_URL] = make_response(200, _search_body("com.thoughtworks.xstream:xstream:1.4.5"))
    pipeline, resolver, out = _pipeline(local_repo, fake_session)

    checks = pipeline.run([
        Component("XStream", None, ["com.thoughtworks.xstream.XStream"]),
        Component("Blank", "  ", ["com.thoughtworks.xstream.XStream"]),
    ])

    assert resolver.requested == []
    assert fake_session.urls == [SEARCH_URL, SEARCH_URL]
    assert out.getvalue().count("  No Maven coordinates provided, searching...\n") == 2
    assert "    - com.thoughtworks.xstream:xstream:1.4.5\n" in out.getvalue()
    assert all(c.verification is None for c in checks)


def test_resolution_error_falls_back_to_search(local_repo, fake_session, make_response):
    fake_session.routes[SEARCH_URL] = make_response(200, _search_body())
    pipeline, resolver, out = _pipeline(local_repo, fake_session)

    checks = pipeline.run([Component("Y", "g:gone:9.9", ["a.B"])])

    assert resolver.requested == ["g:gone:9.9"]
    assert checks[0].verification.status == VerificationStatus.ERROR
    assert "  ✗ Class not found in g:gone:9.9\n" in out.getvalue()
    assert checks[0].search_results == []


def test_one_check_per_class(local_repo, fake_session, make_response):
    fake_session.routes[SEARCH_URL] = make_response(200, _search_body())
    pipeline, _, _ = _pipeline(local_repo, fake_session)

    checks = pipeline.run([
        Component("A", None, ["a.One", "a.Two"]),
        Component("B", None, []),
        Component("C", None, ["c.Three"]),
    ])

    assert [(c.component, c.class_name) for c in checks] == [
        ("A", "a.One"), ("A", "a.Two"), ("C", "c.Three")
    ]
