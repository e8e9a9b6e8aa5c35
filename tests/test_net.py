import socket
import threading
import time

import pytest

from linkcheck.net import open_server, receive_message, send_message

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
        except BaseException as exc:  # handed back to the test thread
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


def _send_when_ready(message, port):
    for _ in range(300):
        try:
            return send_message(message, HOST, port)
        except ConnectionRefusedError:
            time.sleep(0.01)
    raise AssertionError("server never started listening")


def _raw_send_when_ready(port, payload):
    for _ in range(300):
        try:
            with socket.create_connection((HOST, port)) as conn:
                conn.sendall(payload)
            return len(payload)
        except ConnectionRefusedError:
            time.sleep(0.01)
    raise AssertionError("server never started listening")


def test_open_server_listens_on_assigned_port():
    with open_server(HOST, 0) as server:
        port = server.getsockname()[1]
        assert port > 0
        with socket.create_connection((HOST, port)) as client:
            conn, _ = server.accept()
            with conn:
                client.sendall(b"ping")
                assert conn.recv(16) == b"ping"


def test_send_message_writes_nul_terminated_text():
    with open_server(HOST, 0) as server:
        port = server.getsockname()[1]
        sent = send_message("hello", HOST, port)
        conn, _ = server.accept()
        with conn:
            data = b""
            while chunk := conn.recv(64):
                data += chunk
    assert data == b"hello\0"
    assert sent == len(data)


def test_receive_message_round_trip():
    port = _free_port()
    thread, box = _background(receive_message, HOST, port, 5)
    _send_when_ready("1101011011", port)
    assert _result(thread, box) == "1101011011"


def test_receive_message_stops_at_nul_padding():
    port = _free_port()
    payload = b"1011" + b"\0" * 46
    thread, box = _background(_raw_send_when_ready, port, payload)
    received = receive_message(HOST, port, 5)
    assert received == "1011"
    assert _result(thread, box) == len(payload)


def test_receive_message_times_out():
    with pytest.raises(TimeoutError):
        receive_message(HOST, _free_port(), 0.05)


def test_send_message_without_server_fails():
    with pytest.raises(ConnectionRefusedError):
        send_message("x", HOST, _free_port())