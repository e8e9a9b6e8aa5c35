import io
import socket
import threading
import time

from linkcheck.chat import run_client, serve, split_messages

HOST = "127.0.0.1"


def _free_port():
    with socket.socket() as probe:
        probe.bind((HOST, 0))
        return probe.getsockname()[1]


def _background(fn, *args):
    box = {}

    def target():
        try:
            box["value"] = fn(*args)
        except BaseException as exc:
            box["error"] = exc

    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread, box


def _result(thread, box, timeout=5):
    thread.join(timeout)
    assert not thread.is_alive()
    if "error" in box:
        raise box["error"]
    return box["value"]


def _retry(fn, *args):
    for _ in range(300):
        try:
            return fn(*args)
        except ConnectionRefusedError:
            time.sleep(0.01)
    raise AssertionError("server never started listening")


def test_split_messages_keeps_partial_tail():
    assert split_messages(b"hi\0there\0par") == (["hi", "there"], b"par")


def test_split_messages_empty_buffer():
    assert split_messages(b"") == ([], b"")


def test_split_messages_empty_message():
    messages, rest = split_messages(b"\0")
    assert messages == [""]
    assert rest == b""


def test_client_and_server_round_trip():
    port = _free_port()
    out = io.StringIO()
    thread, box = _background(serve, HOST, port, out)
    sent = _retry(run_client, ["hello\n", "world", "quit", "ignored"], HOST, port)
    assert sent == ["hello", "world", "quit"]
    assert _result(thread, box) == ["hello", "world"]
    text = out.getvalue()
    assert "Client says: hello" in text
    assert "Client says: world" in text
    assert "Client ended the chat." in text
    assert "ignored" not in text


def _raw_send(port, payload):
    with socket.create_connection((HOST, port)) as conn:
        conn.sendall(payload)
    return len(payload)


def test_server_reports_disconnect():
    port = _free_port()
    out = io.StringIO()
    payload = b"abc\0de"
    thread, box = _background(_retry, _raw_send, port, payload)
    received = serve(HOST, port, out)
    assert received == ["abc"]
    assert "Client disconnected or error." in out.getvalue()
    assert _result(thread, box) == len(payload)


def test_client_without_quit_sends_everything():
    port = _free_port()
    out = io.StringIO()
    thread, box = _background(serve, HOST, port, out)
    sent = _retry(run_client, iter(["one", "two"]), HOST, port)
    assert sent == ["one", "two"]
    assert _result(thread, box) == sent