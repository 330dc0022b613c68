from datetime import date
import pytest

from allocation.adapters.repository import InMemoryRepository
from allocation.domain.exceptions import (
    InexistentProduct, InvalidSKU, LineIsNotAllocatedError, OutOfStock,
    ProcessingError, RepositoryError, ServiceError
)
from allocation.domain.model import Batch, OrderLine, Product
from allocation.orchestration import services


SKU = 'RETRO-CLOCK'


@pytest.fixture
def stocked_repo():
    return InMemoryRepository.from_batches([
        Batch('in-stock-batch', SKU, 100, eta=None),
        Batch('shipment-batch', SKU, 100, eta=date(2022, 5, 22)),
    ])


class TestAddBatch:

    def test_add_batch_for_existing_product(self, stocked_repo):
        services.add_batch(Batch('some-ref', SKU, 10), stocked_repo)

        batches = stocked_repo.read(SKU).batches
        assert len(batches) == 3
        assert 'some-ref' in {b.reference for b in batches}


    def test_add_batch_for_new_product(self, repo):
        services.add_batch(Batch('some-ref', 'NEW-SKU', 10), repo)

        product = repo.read('NEW-SKU')
        assert [b.reference for b in product.batches] == ['some-ref']


    def test_add_batch_keeps_existing_allocations(self, stocked_repo):
        services.allocate(OrderLine('oref', SKU, 10), stocked_repo)
        services.add_batch(Batch('some-ref', SKU, 10), stocked_repo)

        assert stocked_repo.read(SKU).available_quantity == 200


    def test_add_duplicated_batch_raises_processing_error(self, stocked_repo):
        with pytest.raises(ProcessingError):
            services.add_batch(Batch('in-stock-batch', SKU, 10), stocked_repo)

        assert len(stocked_repo.read(SKU).batches) == 2


    def test_same_batch_reference_can_be_used_by_different_products(self, repo):
        services.add_batch(Batch('b1', 'SKU-A', 10), repo)
        services.add_batch(Batch('b1', 'SKU-B', 20), repo)

        assert repo.read('SKU-A').available_quantity == 10
        assert repo.read('SKU-B').available_quantity == 20


class TestAllocate:

    def test_allocate_returns_batch_reference(self, stocked_repo):
        line = OrderLine('oref', SKU, 10)
        assert services.allocate(line, stocked_repo) == 'in-stock-batch'


    def test_allocate_persists_the_allocation(self, stocked_repo):
        services.allocate(OrderLine('oref', SKU, 10), stocked_repo)

        batches = {b.reference: b for b in stocked_repo.read(SKU).batches}
        assert batches['in-stock-batch'].available_quantity == 90
        assert batches['shipment-batch'].available_quantity == 100


    def test_allocate_is_idempotent(self, stocked_repo):
        line = OrderLine('oref', SKU, 10)
        services.allocate(line, stocked_repo)
        services.allocate(line, stocked_repo)

        assert stocked_repo.read(SKU).available_quantity == 190


    def test_allocate_raises_repository_error_for_inexistent_product(self, stocked_repo):
        with pytest.raises(RepositoryError) as exc_info:
            services.allocate(OrderLine('oref', 'INVALID-SKU', 10), stocked_repo)

        assert isinstance(exc_info.value.error, InexistentProduct)
        assert exc_info.value.__cause__ is exc_info.value.error


    def test_allocate_raises_processing_error_when_out_of_stock(self, stocked_repo):
        with pytest.raises(ProcessingError) as exc_info:
            services.allocate(OrderLine('oref', SKU, 1000), stocked_repo)

        assert isinstance(exc_info.value.error, OutOfStock)
        assert stocked_repo.read(SKU).available_quantity == 200


    def test_service_errors_share_a_base(self, stocked_repo):
        for line in (OrderLine('oref', 'INVALID-SKU', 10), OrderLine('oref', SKU, 1000)):
            with pytest.raises(ServiceError):
                services.allocate(line, stocked_repo)


    def test_allocate_raises_processing_error_for_misplaced_product(self):
        class MisplacingRepository(InMemoryRepository):
            def read(self, sku):
                return Product('OTHER-SKU')

        with pytest.raises(ProcessingError) as exc_info:
            services.allocate(OrderLine('oref', SKU, 1), MisplacingRepository())

        assert isinstance(exc_info.value.error, InvalidSKU)


class TestDeallocate:

    def test_deallocate_returns_batch_reference(self, stocked_repo):
        line = OrderLine('oref', SKU, 10)
        services.allocate(line, stocked_repo)

        assert services.deallocate(line, stocked_repo) == 'in-stock-batch'
        assert stocked_repo.read(SKU).available_quantity == 200


    def test_deallocate_raises_processing_error_for_not_allocated_line(self, stocked_repo):
        with pytest.raises(ProcessingError) as exc_info:
            services.deallocate(OrderLine('oref', SKU, 10), stocked_repo)

        assert isinstance(exc_info.value.error, LineIsNotAllocatedError)


    def test_deallocate_raises_repository_error_for_inexistent_product(self, repo):
        with pytest.raises(RepositoryError):
            services.deallocate(OrderLine('oref', SKU, 10), repo)
