"""Pytest configuration and fixtures."""

import os

import pytest

# Set environment variables before imports
os.environ["TABLE_NAME"] = "sitesmith-test"
os.environ["ASSETS_BUCKET"] = "sitesmith-assets-test"
os.environ["ASSET_URL_EXPIRY"] = "900"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def dynamodb_table(aws_credentials):
    """Create mocked DynamoDB table."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName="sitesmith-test",
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()

        yield table


@pytest.fixture
def s3_bucket(aws_credentials):
    """Create mocked S3 bucket for assets."""
    import boto3
    from moto import mock_aws

    with mock_aws():
        s3 = boto3.client("s3", region_name="us-east-1")
        s3.create_bucket(Bucket="sitesmith-assets-test")

        yield s3


@pytest.fixture
def sample_content():
    """Create a minimal content record (identity fields only)."""
    from sitesmith.models.content import ContentRecord

    return ContentRecord(
        id="content-123",
        submission_id="sub-456",
        business_name="Acme Builders",
        tagline="Quality homes since 1990",
        about="We build and renovate homes across the county.",
    )


@pytest.fixture
def full_content():
    """Create a content record with most optional fields filled in."""
    from sitesmith.models.content import (
        Contact,
        ContentRecord,
        Cta,
        FooterInfo,
        NavLink,
        Product,
        ServiceItem,
        SocialLink,
        Testimonial,
    )

    return ContentRecord(
        id="content-789",
        submission_id="sub-789",
        business_name="Studio Nord",
        tagline="Architecture for everyday life",
        about="A small practice designing calm, durable spaces.",
        navbar_links=[
            NavLink(label="Work", href="#featured"),
            NavLink(label="Contact", href="#contact"),
        ],
        hero_cta=Cta(label="Start a project", link="#contact"),
        hero_testimonial=Testimonial(quote="Wonderful to work with.", author="Jane Doe", role="Client"),
        hero_images=[
            "https://cdn.example.com/hero-1.jpg",
            "https://cdn.example.com/hero-2.jpg",
        ],
        about_tags=["Residential", "Interiors"],
        services=[
            ServiceItem(name="Planning", description="Permits and drawings."),
            ServiceItem(name="Interiors", description="Spaces that feel right."),
        ],
        featured_products=[
            Product(
                title="Lake House",
                description="A timber retreat.",
                image="https://cdn.example.com/lake.jpg",
                tags=["Timber"],
            ),
        ],
        footer=FooterInfo(
            headline="Say hello",
            social_links=[SocialLink(platform="Instagram", url="https://instagram.com/studionord")],
        ),
        contact=Contact(phone="+44 20 7946 0000", email="hello@studionord.example", address="1 Quay St"),
    )
