"""
Unit tests for the innovation records, the InnovationLedger and the mutation results.
"""

import pytest
from neatstep.genotype.innovation import (ConnectionInnovation, NodeInnovation, InnovationLedger,
                                          NothingAdded, GenesAdded)


# ============================================================================
# Test: innovation records
# ============================================================================

class TestInnovationRecords:
    """Test ConnectionInnovation and NodeInnovation."""

    def test_equal_records_hash_equal(self):
        assert ConnectionInnovation(0, 2) == ConnectionInnovation(0, 2)
        assert hash(NodeInnovation(1, 3)) == hash(NodeInnovation(1, 3))

    def test_kinds_are_distinct(self):
        """A new connection and a split of the same pair are different innovations."""
        assert ConnectionInnovation(0, 2) != NodeInnovation(0, 2)
        assert len({ConnectionInnovation(0, 2), NodeInnovation(0, 2)}) == 2

    def test_direction_matters(self):
        assert ConnectionInnovation(0, 2) != ConnectionInnovation(2, 0)

    def test_number_of_genes(self):
        assert ConnectionInnovation(0, 1).num_genes == 1
        assert NodeInnovation(0, 1).num_genes == 2

    def test_immutable(self):
        record = ConnectionInnovation(0, 1)
        with pytest.raises(AttributeError):
            record.in_node = 5


# ============================================================================
# Test: InnovationLedger
# ============================================================================

class TestInnovationLedger:
    """Test registration, lookup and reset."""

    def test_starts_empty(self):
        ledger = InnovationLedger()
        assert ledger.next_innovation == 0
        assert len(ledger) == 0
        assert ledger.lookup(ConnectionInnovation(0, 1)) is None

    def test_custom_starting_counter(self):
        assert InnovationLedger(10).next_innovation == 10

    def test_register_connection(self):
        ledger = InnovationLedger()
        first = ledger.register(ConnectionInnovation(0, 2), 1)

        assert first == 0
        assert ledger.next_innovation == 1
        assert ledger.lookup(ConnectionInnovation(0, 2)) == 0
        assert ConnectionInnovation(0, 2) in ledger

    def test_register_node_consumes_two_numbers(self):
        ledger = InnovationLedger(1)
        first = ledger.register(NodeInnovation(0, 2), 2)

        assert first == 1
        assert ledger.next_innovation == 3
        assert ledger.lookup(NodeInnovation(0, 2)) == 1

    def test_numbers_are_consecutive(self):
        ledger = InnovationLedger()
        assert ledger.register(ConnectionInnovation(0, 2), 1) == 0
        assert ledger.register(NodeInnovation(0, 2), 2) == 1
        assert ledger.register(ConnectionInnovation(1, 2), 1) == 3
        assert ledger.next_innovation == 4
        assert len(ledger) == 3

    def test_register_twice_raises_error(self):
        ledger = InnovationLedger()
        ledger.register(ConnectionInnovation(0, 2), 1)
        with pytest.raises(ValueError, match="already registered"):
            ledger.register(ConnectionInnovation(0, 2), 1)
        assert ledger.next_innovation == 1

    def test_reset_forgets_innovations_keeps_counter(self):
        ledger = InnovationLedger()
        ledger.register(ConnectionInnovation(0, 2), 1)
        ledger.register(NodeInnovation(0, 2), 2)

        ledger.reset()
        assert len(ledger) == 0
        assert ledger.lookup(ConnectionInnovation(0, 2)) is None
        assert ledger.next_innovation == 3

        # The same change in a new generation gets a new number
        assert ledger.register(ConnectionInnovation(0, 2), 1) == 3

    def test_repr(self):
        ledger = InnovationLedger(5)
        ledger.register(ConnectionInnovation(0, 1), 1)
        assert repr(ledger) == "InnovationLedger(next_innovation=6, innovations=1)"


# ============================================================================
# Test: mutation results
# ============================================================================

class TestMutationResults:
    """Test NothingAdded and GenesAdded."""

    def test_nothing_added_instances_are_equal(self):
        assert NothingAdded() == NothingAdded()

    def test_genes_added(self):
        result = GenesAdded(NodeInnovation(0, 2), (4, 5))
        assert result.innovation == NodeInnovation(0, 2)
        assert result.innovation_numbers == (4, 5)
        assert result.num_genes == 2

    def test_results_are_distinguishable(self):
        added = GenesAdded(ConnectionInnovation(0, 2), (0,))
        assert isinstance(added, GenesAdded)
        assert not isinstance(NothingAdded(), GenesAdded)
        assert added != NothingAdded()
