import io
import socket
import sys
import threading

from chapterkit.netcat import main, must_copy


def test_must_copy_copies_everything():
    dst = io.BytesIO()
    assert must_copy(dst, io.BytesIO(b"hello")) == 5
    assert dst.getvalue() == b"hello"


def test_must_copy_from_socket():
    a, b = socket.socketpair()
    with a, b:
        a.sendall(b"line one\nline two\n")
        a.shutdown(socket.SHUT_WR)
        dst = io.BytesIO()
        with b.makefile("rb") as src:
            count = must_copy(dst, src)
    assert dst.getvalue() == b"line one\nline two\n"
    assert count == len(dst.getvalue())


def _listener():
    srv = socket.socket()
    srv.bind(("127.0.0.1", 0))
    srv.listen(1)
    return srv


def test_read_only_copies_server_output(capsysbinary):
    srv = _listener()
    port = srv.getsockname()[1]

    def serve():
        conn, _ = srv.accept()
        with conn:
            conn.sendall(b"12:00:00\n")

    thread = threading.Thread(target=serve)
    thread.start()
    try:
        status = main(["--host", "127.0.0.1", "--port", str(port), "--read-only"])
    finally:
        thread.join(5)
        srv.close()
    assert status == 0
    assert capsysbinary.readouterr().out == b"12:00:00\n"


def test_sends_stdin_to_server(monkeypatch):
    srv = _listener()
    port = srv.getsockname()[1]
    received = []

    def serve():
        conn, _ = srv.accept()
        with conn:
            data = b""
            while chunk := conn.recv(4096):
                data += chunk
            received.append(data)

    thread = threading.Thread(target=serve)
    thread.start()
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"ping\n")))
    try:
        status = main(["--host", "127.0.0.1", "--port", str(port)])
    finally:
        thread.join(5)
        srv.close()
    assert status == 0
    assert received == [b"ping\n"]


def test_connection_refused_returns_error():
    srv = _listener()
    port = srv.getsockname()[1]
    srv.close()
    assert main(["--host", "127.0.0.1", "--port", str(port), "--read-only"]) == 1