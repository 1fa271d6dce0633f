"""
AI analyst over completed orders.

The administrator asks a free-form question; the question and a compact
JSON digest of every completed order are sent to Gemini's
``generateContent`` endpoint in a single request, and the answer text is
returned. There are no retries: any failure surfaces as
``AnalystUnavailableError`` with a generic message.
"""

import json
import logging

import requests
from django.conf import settings

from apps.catalog.models import Restaurant
from apps.orders.models import CompletedOrder

from .analytics import stored_amount
from .exceptions import EmptyQuestionError, AnalystUnavailableError

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are an expert financial and logistics analyst for a restaurant group. "
    "Your name is 'Giorgi the Analyst'. Analyze the provided order data to answer "
    "the user's question. Provide concise, clear, and actionable insights. "
    "All your responses MUST be in the Georgian language."
)

GENERIC_ERROR_MESSAGE = 'მოთხოვნის დამუშავებისას მოხდა შეცდომა. გთხოვთ, სცადოთ თავიდან.'

EXAMPLE_QUESTIONS = [
    'გააანალიზე ფასების ტრენდები ყველაზე ძვირადღირებული პროდუქტებისთვის.',
    'რომელ რესტორანს აქვს მეტი დანახარჯი ხორცპროდუქტებზე?',
    'გასული თვის ხარჯების შეჯამება.',
    'რომელი პროდუქტების ფასი გაიზარდა ყველაზე მეტად ბოლო პერიოდში?',
]

THINKING_BUDGET = 32768


def _number(value):
    amount = stored_amount(value)
    return None if amount is None else float(amount)


def build_order_context(orders=None):
    """
    Compact digest of completed orders for the prompt.

    Total cost counts only recorded actual quantity times unit price;
    item quantity is the actual quantity when recorded, else the request.
    """
    if orders is None:
        orders = CompletedOrder.objects.order_by('-completion_date')

    context = []
    for order in orders:
        items = []
        total = 0.0
        for item in order.items:
            actual = _number(item.get('actual_quantity'))
            price = _number(item.get('price_per_unit'))
            total += (actual or 0) * (price or 0)
            product = item.get('product') or {}
            items.append({
                'name': product.get('name_ka', ''),
                'category': product.get('category_ka', ''),
                'quantity': actual if actual is not None else _number(item.get('quantity')),
                'unit': item.get('unit', ''),
                'pricePerUnit': price,
            })
        context.append({
            'restaurant': Restaurant(order.restaurant).label,
            'completionDate': order.completion_date.isoformat(),
            'totalCost': round(total, 2),
            'items': items,
        })
    return context


def build_prompt(question, context):
    restaurants = ' and '.join(f"'{label}'" for label in Restaurant.labels)
    return (
        f"Context: You are provided with a JSON array of completed market orders for "
        f"two restaurants: {restaurants}. Each order includes the restaurant name, "
        f"completion date, and a list of items with their names, categories, "
        f"quantities, units, and price per unit.\n\n"
        f"Data:\n{json.dumps(context, ensure_ascii=False, indent=2)}\n\n"
        f"User's question: \"{question}\""
    )


def _extract_text(result):
    """Join the non-thought text parts of the first candidate."""
    if not isinstance(result, dict):
        return ''
    candidates = result.get('candidates') or []
    if not candidates:
        return ''
    parts = (candidates[0].get('content') or {}).get('parts') or []
    return ''.join(
        part.get('text', '') for part in parts if not part.get('thought')
    ).strip()


class ProcurementAnalyst:
    """Gemini client answering questions about purchase history."""

    def __init__(self, api_key=None, model=None, api_url=None, timeout=None):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.api_url = (api_url or settings.GEMINI_API_URL).replace('{model}', self.model)
        self.timeout = timeout or settings.GEMINI_TIMEOUT

    def build_payload(self, prompt):
        return {
            'systemInstruction': {'parts': [{'text': SYSTEM_INSTRUCTION}]},
            'contents': [{'role': 'user', 'parts': [{'text': prompt}]}],
            'generationConfig': {
                'thinkingConfig': {'thinkingBudget': THINKING_BUDGET},
            },
        }

    def ask(self, question, context=None):
        """
        Answer a question about completed orders.

        Raises:
            EmptyQuestionError: If the question is blank
            AnalystUnavailableError: If the model cannot be reached or
                returns no answer
        """
        question = (question or '').strip()
        if not question:
            raise EmptyQuestionError('Ask a question first.')

        if not self.api_key:
            logger.error("Gemini API key is not configured")
            raise AnalystUnavailableError(GENERIC_ERROR_MESSAGE)

        if context is None:
            context = build_order_context()
        payload = self.build_payload(build_prompt(question, context))

        try:
            response = requests.post(
                self.api_url,
                params={'key': self.api_key},
                json=payload,
                headers={'Content-Type': 'application/json'},
                timeout=self.timeout,
            )
            response.raise_for_status()
            result = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error("Gemini request failed: %s", e)
            raise AnalystUnavailableError(GENERIC_ERROR_MESSAGE) from e

        text = _extract_text(result)
        if not text:
            logger.error("Gemini returned no answer text: %s", result)
            raise AnalystUnavailableError(GENERIC_ERROR_MESSAGE)

        logger.info("Analyst answered a question over %d completed orders", len(context))
        return text


def ask_analyst(question):
    """Answer ``question`` with the configured Gemini model."""
    return ProcurementAnalyst().ask(question)
