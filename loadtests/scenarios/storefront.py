"""Storefront load test scenarios.

Stateful SequentialTaskSet journeys that replay what the storefront does
against the API: browse, search as you type, build a cart, place the order
and write back the final space counts. Steps execute in order — each
depends on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import customer_name, lesson_data, order_data, search_term
from loadtests.helpers.state import RaceState, ShopperState


class BrowseAndSearchJourney(SequentialTaskSet):
    """List lessons -> type a search term one key at a time -> clear the search."""

    @task
    def list_lessons(self):
        with self.client.get("/lessons", catch_response=True, name="GET /lessons") as resp:
            if resp.status_code != 200:
                resp.failure(f"List lessons failed: {resp.status_code}")
                self.interrupt()

    @task
    def search_as_you_type(self):
        term = search_term()
        for end in range(1, len(term) + 1):
            with self.client.get(
                "/search",
                params={"q": term[:end]},
                catch_response=True,
                name="GET /search",
            ) as resp:
                if resp.status_code != 200:
                    resp.failure(f"Search failed: {resp.status_code}")

    @task
    def clear_search(self):
        self.client.get("/lessons", name="GET /lessons")

    @task
    def done(self):
        self.interrupt()


class CheckoutJourney(SequentialTaskSet):
    """List lessons -> fill cart -> POST order -> PUT spaces for each lesson.

    Models one shopper's whole visit. Units are only taken from lessons the
    shopper saw with open spaces, as the storefront would.
    """

    def on_start(self):
        self.state = ShopperState()

    @task
    def list_lessons(self):
        with self.client.get("/lessons", catch_response=True, name="GET /lessons") as resp:
            if resp.status_code != 200:
                resp.failure(f"List lessons failed: {resp.status_code}")
                self.interrupt()
                return
            self.state.load(resp.json())

    @task
    def fill_cart(self):
        available = [lesson_id for lesson_id, spaces in self.state.spaces.items() if spaces > 0]
        if not available:
            self.interrupt()
            return
        for _ in range(random.randint(1, 3)):
            self.state.take(random.choice(available))
        if not self.state.cart:
            self.interrupt()

    @task
    def place_order(self):
        with self.client.post(
            "/orders",
            json=order_data(self.state.cart),
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["order_id"]
            else:
                resp.failure(f"Place order failed: {resp.status_code}")
                self.interrupt()

    @task
    def write_back_spaces(self):
        for lesson_id, spaces in self.state.space_updates().items():
            with self.client.put(
                f"/lessons/{lesson_id}",
                json={"spaces": spaces},
                catch_response=True,
                name="PUT /lessons/{id}",
            ) as resp:
                if resp.status_code != 200:
                    resp.failure(f"Space update failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class OversellRace(SequentialTaskSet):
    """Create a one-space lesson -> two shoppers read it -> both buy it.

    Each write carries the count the shopper saw minus one, so both write 0
    and the lesson ends up with two orders for a single space.
    """

    def on_start(self):
        self.state = RaceState()

    @task
    def create_scarce_lesson(self):
        with self.client.post(
            "/lessons",
            json=lesson_data(spaces=1),
            catch_response=True,
            name="POST /lessons",
        ) as resp:
            if resp.status_code == 201:
                self.state.lesson_id = resp.json()["lesson_id"]
                self.state.seen_spaces = 1
            else:
                resp.failure(f"Create lesson failed: {resp.status_code}")
                self.interrupt()

    @task
    def both_shoppers_buy(self):
        for _ in range(2):
            with self.client.post(
                "/orders",
                json={"name": customer_name(), "phone": "07700900123", "lessons": [self.state.lesson_id]},
                catch_response=True,
                name="POST /orders",
            ) as resp:
                if resp.status_code != 201:
                    resp.failure(f"Place order failed: {resp.status_code}")

        for _ in range(2):
            self.client.put(
                f"/lessons/{self.state.lesson_id}",
                json={"spaces": self.state.seen_spaces - 1},
                name="PUT /lessons/{id}",
            )

    @task
    def done(self):
        self.interrupt()


class StorefrontUser(HttpUser):
    """Locust user simulating storefront traffic.

    Weighted distribution:
    - 60% Browse and search (most visitors never check out)
    - 35% Checkout journey
    - 5% Oversell race
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        BrowseAndSearchJourney: 12,
        CheckoutJourney: 7,
        OversellRace: 1,
    }
