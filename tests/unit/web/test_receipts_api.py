#!/usr/bin/env python3
"""
Unit tests for the receipt endpoints.
Tests POST /receipts/process and GET /receipts/{id}/points.
"""

import sys
import unittest
import uuid
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from fastapi.testclient import TestClient

from core.receipts import ReceiptService, ReceiptStore
from web.backend.app import create_app
from tests.fixtures.receipt_fixtures import (
    TARGET_RECEIPT,
    TARGET_POINTS,
    CORNER_MARKET_RECEIPT,
    CORNER_MARKET_POINTS,
    make_receipt
)


class TestReceiptEndpoints(unittest.TestCase):
    """Unit tests for the receipt processing API."""

    def setUp(self):
        self.store = ReceiptStore()
        self.app = create_app(ReceiptService(self.store))
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def _process(self, payload):
        response = self.client.post('/receipts/process', json=payload)
        self.assertEqual(response.status_code, 200)
        return response.json()['id']

    def test_process_returns_id(self):
        response = self.client.post('/receipts/process', json=TARGET_RECEIPT)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(set(data), {'id'})
        uuid.UUID(data['id'])

    def test_points_for_processed_receipts(self):
        for payload, expected in (
            (TARGET_RECEIPT, TARGET_POINTS),
            (CORNER_MARKET_RECEIPT, CORNER_MARKET_POINTS)
        ):
            with self.subTest(retailer=payload['retailer']):
                receipt_id = self._process(payload)

                response = self.client.get(f'/receipts/{receipt_id}/points')

                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.json(), {'points': expected})

    def test_long_total_is_scored(self):
        receipt_id = self._process(make_receipt(total="1" * 30 + ".00"))

        response = self.client.get(f'/receipts/{receipt_id}/points')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'points': 94})

    def test_points_for_unknown_id_is_404(self):
        for receipt_id in (str(uuid.uuid4()), 'not-a-uuid'):
            with self.subTest(receipt_id=receipt_id):
                response = self.client.get(f'/receipts/{receipt_id}/points')

                self.assertEqual(response.status_code, 404)
                data = response.json()
                self.assertFalse(data['success'])
                self.assertEqual(data['type'], 'ReceiptNotFoundError')

    def test_missing_field_is_400(self):
        payload = make_receipt()
        del payload['purchaseTime']

        response = self.client.post('/receipts/process', json=payload)

        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertFalse(data['success'])
        self.assertEqual(data['type'], 'ReceiptShapeError')
        self.assertIn('purchaseTime', [d['loc'] for d in data['details']])
        self.assertEqual(len(self.store), 0)

    def test_mistyped_item_is_400(self):
        payload = make_receipt(items=[{'shortDescription': 'Gatorade', 'price': 2.25}])

        response = self.client.post('/receipts/process', json=payload)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['type'], 'ReceiptShapeError')

    def test_non_object_body_is_400(self):
        for body in ('[1, 2, 3]', '"receipt"', 'not json at all'):
            with self.subTest(body=body):
                response = self.client.post(
                    '/receipts/process',
                    content=body,
                    headers={'Content-Type': 'application/json'}
                )
                self.assertEqual(response.status_code, 400)
                self.assertFalse(response.json()['success'])

    def test_unparsable_values_still_processed(self):
        receipt_id = self._process(make_receipt(retailer='Target', total='lots', purchaseTime='noon'))

        response = self.client.get(f'/receipts/{receipt_id}/points')

        self.assertEqual(response.status_code, 200)
        # 6 (retailer) + 5 (two items)
        self.assertEqual(response.json()['points'], 11)

    def test_breakdown(self):
        receipt_id = self._process(CORNER_MARKET_RECEIPT)

        response = self.client.get(f'/receipts/{receipt_id}/breakdown')

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['id'], receipt_id)
        self.assertEqual(data['points'], CORNER_MARKET_POINTS)
        self.assertEqual(len(data['rules']), 8)
        self.assertEqual(sum(r['points'] for r in data['rules']), CORNER_MARKET_POINTS)
        self.assertEqual(data['rules'][0]['rule'], 'retailer_alphanumeric')
        self.assertIn('stored_at', data)

    def test_breakdown_unknown_id_is_404(self):
        response = self.client.get(f'/receipts/{uuid.uuid4()}/breakdown')

        self.assertEqual(response.status_code, 404)

    def test_health_reports_stored_count(self):
        self._process(TARGET_RECEIPT)

        response = self.client.get('/health')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            'status': 'healthy',
            'service': 'receipt-points',
            'receipts_stored': 1
        })

    def test_apps_do_not_share_stores(self):
        receipt_id = self._process(TARGET_RECEIPT)

        other = TestClient(create_app(), raise_server_exceptions=False)
        response = other.get(f'/receipts/{receipt_id}/points')

        self.assertEqual(response.status_code, 404)

    def test_unexpected_error_is_500(self):
        with patch.object(ReceiptService, 'lookup', side_effect=RuntimeError("boom")):
            response = self.client.get(f'/receipts/{uuid.uuid4()}/points')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {
            'success': False,
            'error': 'Internal server error',
            'type': 'InternalError'
        })


if __name__ == '__main__':
    unittest.main(verbosity=2)
