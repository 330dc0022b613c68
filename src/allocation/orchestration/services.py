from contextlib import contextmanager
from allocation.config import get_logger
from allocation.domain import model as domain_
from allocation.domain.exceptions import (
    DomainException, InexistentProduct, OutOfStock, ProcessingError,
    RepositoryError, RepositoryException
)
from allocation.domain.ports import AbstractRepository


logger = get_logger()


@contextmanager
def translate_errors(operation: str):
    """Re-raises repository and domain errors as service errors, keeping the
    original one as the cause."""
    try:
        yield
    except RepositoryException as e:
        logger.error(f'Exception handling {operation}: {type(e).__name__}')
        raise RepositoryError(e) from e
    except OutOfStock as e:
        logger.warning(f"'{e.sku}' is out of stock!")
        raise ProcessingError(e) from e
    except DomainException as e:
        logger.error(f'Exception handling {operation}: {type(e).__name__}')
        raise ProcessingError(e) from e


def add_batch(batch: domain_.Batch, repo: AbstractRepository) -> None:
    logger.debug(f'Handling add_batch for {batch}')

    with translate_errors('add_batch'):
        try:
            product = repo.read(batch.sku)
        except InexistentProduct:
            product = domain_.Product(batch.sku)

        product.append_batch(batch)
        repo.update(product)


def allocate(line: domain_.OrderLine, repo: AbstractRepository) -> str:
    logger.debug(f'Handling allocate for {line}')

    with translate_errors('allocate'):
        product = repo.read(line.sku)
        batch_ref = product.allocate(line)
        repo.update(product)

    return batch_ref


def deallocate(line: domain_.OrderLine, repo: AbstractRepository) -> str:
    logger.debug(f'Handling deallocate for {line}')

    with translate_errors('deallocate'):
        product = repo.read(line.sku)
        batch_ref = product.deallocate(line)
        repo.update(product)

    return batch_ref
