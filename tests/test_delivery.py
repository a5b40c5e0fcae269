import math
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src", "py")))

from data_types import Clock, MailItem, PriorityMailItem
from delivery import DeliveryReport, calculate_delivery_score
from errors import MailAlreadyDeliveredError


def test_score_normal_item():
    item = MailItem(id=1, destination_floor=3, arrival_time=2, weight=100)
    assert calculate_delivery_score(item, 12) == pytest.approx(math.pow(10, 1.2))


def test_score_priority_item():
    item = PriorityMailItem(2, 3, 2, 100, 100)
    assert calculate_delivery_score(item, 12) == pytest.approx(math.pow(10, 1.2) * 11)


def test_report_records_and_rejects_duplicates():
    clock = Clock()
    report = DeliveryReport(clock)
    item = MailItem(id=1, destination_floor=3, arrival_time=0, weight=100)
    clock.tick()
    clock.tick()
    report.deliver(item)
    assert report.delivered_count == 1
    assert report.records[1]["delivered_time"] == 2
    with pytest.raises(MailAlreadyDeliveredError):
        report.deliver(item)

    summary = report.summary()
    assert summary["delivered"] == 1
    assert summary["final_delivery_time"] == 2
    assert summary["total_score"] == pytest.approx(math.pow(2, 1.2))


def test_deliveries_sorted_by_time():
    clock = Clock()
    report = DeliveryReport(clock)
    a = MailItem(id=5, destination_floor=3, arrival_time=0, weight=100)
    b = MailItem(id=2, destination_floor=3, arrival_time=0, weight=100)
    clock.tick()
    report.deliver(a)
    clock.tick()
    report.deliver(b)
    assert [d["id"] for d in report.deliveries()] == [5, 2]


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        MailItem(id=1, destination_floor=3, arrival_time=0, weight=-1)
