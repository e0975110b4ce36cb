"""Тесты MiddlewarePipeline."""

from api_connector import MiddlewarePipeline, MockClient, MockResponse
from conftest import GetUserRequest


class TestRegistration:
    def test_order_kept(self):
        pipeline = MiddlewarePipeline()
        first, second = (lambda p: None), (lambda p: None)

        pipeline.on_request(first).on_request(second)

        assert pipeline.request_pipes() == [first, second]

    def test_named_hook_replaced(self):
        pipeline = MiddlewarePipeline()
        old, new = (lambda r: None), (lambda r: None)

        pipeline.on_response(old, name="log")
        pipeline.on_response(new, name="log")

        assert pipeline.response_pipes() == [new]

    def test_merge_returns_new_pipeline(self):
        a = MiddlewarePipeline().on_request(lambda p: None)
        b = MiddlewarePipeline().on_response(lambda r: None)

        merged = a.merge(b, None)

        assert len(merged) == 2
        assert len(a) == 1
        assert len(b) == 1


class TestExecution:
    def test_request_hook_mutates_pending_request(self, connector):
        connector.middleware.on_request(lambda pending: pending.headers.add("X-Trace", "1"))
        mock = MockClient([MockResponse.make({})])

        connector.send(GetUserRequest(), mock)

        assert mock.get_last_pending_request().headers.get("X-Trace") == "1"
        assert "X-Trace" not in connector.headers

    def test_response_hook_none_keeps_response(self, connector):
        statuses = []
        connector.middleware.on_response(lambda response: statuses.append(response.status))

        response = connector.send(GetUserRequest(), MockClient([MockResponse.make({}, status=202)]))

        assert statuses == [202]
        assert response.status == 202
