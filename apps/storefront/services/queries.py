# =============================================================================
# GraphQL Fragments
# =============================================================================

MONEY_FRAGMENT = """
fragment Money on MoneyV2 {
  amount
  currencyCode
}
"""

IMAGE_FRAGMENT = """
fragment Image on Image {
  id
  url
  altText
  width
  height
}
"""

PRODUCT_VARIANT_FRAGMENT = """
fragment ProductVariant on ProductVariant {
  id
  title
  availableForSale
  quantityAvailable
  price {
    ...Money
  }
  compareAtPrice {
    ...Money
  }
  selectedOptions {
    name
    value
  }
  image {
    ...Image
  }
}
"""


# =============================================================================
# Queries
# =============================================================================

GET_SHOP = """
query getShop {
  shop {
    name
    description
  }
}
"""

# Minimal data for product cards; only the first variant's availability.
GET_COLLECTION_PRODUCTS = MONEY_FRAGMENT + IMAGE_FRAGMENT + """
query getCollectionProducts($handle: String!, $first: Int = 12) {
  collection(handle: $handle) {
    id
    handle
    title
    description
    products(first: $first) {
      nodes {
        id
        handle
        title
        description
        featuredImage {
          ...Image
        }
        priceRange {
          minVariantPrice {
            ...Money
          }
          maxVariantPrice {
            ...Money
          }
        }
        compareAtPriceRange {
          minVariantPrice {
            ...Money
          }
          maxVariantPrice {
            ...Money
          }
        }
        options {
          name
          values
        }
        variants(first: 1) {
          nodes {
            availableForSale
          }
        }
      }
    }
  }
}
"""

# Everything the quick view needs for variant selection.
GET_PRODUCT_BY_HANDLE = MONEY_FRAGMENT + IMAGE_FRAGMENT + PRODUCT_VARIANT_FRAGMENT + """
query getProductByHandle($handle: String!) {
  product(handle: $handle) {
    id
    handle
    title
    description
    descriptionHtml
    vendor
    tags
    featuredImage {
      ...Image
    }
    images(first: 10) {
      nodes {
        ...Image
      }
    }
    options {
      id
      name
      values
    }
    priceRange {
      minVariantPrice {
        ...Money
      }
      maxVariantPrice {
        ...Money
      }
    }
    compareAtPriceRange {
      minVariantPrice {
        ...Money
      }
      maxVariantPrice {
        ...Money
      }
    }
    variants(first: 100) {
      nodes {
        ...ProductVariant
      }
    }
  }
}
"""

GET_COLLECTIONS = """
query getCollections($first: Int = 10) {
  collections(first: $first) {
    nodes {
      id
      handle
      title
    }
  }
}
"""
