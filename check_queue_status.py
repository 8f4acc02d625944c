#!/usr/bin/env python3
"""
Quick script to check that a running task broker accepts and returns tasks
"""

import json
import sys

import requests

BROKER_URL = "http://localhost:8080"
CHECK_QUEUE = "status-check"


def push_task(session, base_url, queue, body, priority=None):
    payload = {"body": body}
    if priority is not None:
        payload["priority"] = priority
    return session.post(f"{base_url}/push", params={"queue": queue}, json=payload)


def pop_task(session, base_url, queue):
    return session.get(f"{base_url}/pop", params={"queue": queue})


def check_queue_status(session=requests, base_url=BROKER_URL, queue=CHECK_QUEUE):
    push_response = push_task(session, base_url, queue, "ping", "high")
    if push_response.status_code != 200:
        print(f"❌ Failed to push task: {push_response.status_code}")
        print(push_response.text)
        return False
    print(f"✅ {push_response.json()['message']}")

    pop_response = pop_task(session, base_url, queue)
    if pop_response.status_code != 200:
        print(f"❌ Failed to pop task: {pop_response.status_code}")
        print(pop_response.text)
        return False

    task = pop_response.json()
    print(f"✅ Popped task from '{queue}'")
    print(f"   Body: {task.get('body')}")
    print(f"   Priority: {task.get('priority')}")

    status_response = session.get(f"{base_url}/queues")
    if status_response.status_code == 200:
        print(f"   Queues: {json.dumps(status_response.json(), indent=2)}")

    return task.get("body") == "ping"


if __name__ == "__main__":
    url = sys.argv[1] if len(sys.argv) > 1 else BROKER_URL
    sys.exit(0 if check_queue_status(base_url=url) else 1)
