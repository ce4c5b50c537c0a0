"""
Known partition, region and service identifiers.

Values from https://docs.aws.amazon.com/general/latest/gr/aws-arns-and-namespaces.html
"""

from enum import Enum

from .models import Identifier


class _KnownIdentifier(str, Enum):
    @property
    def identifier(self) -> Identifier:
        return Identifier.unchecked(self.value)

    def __str__(self) -> str:
        return self.value


class Partition(_KnownIdentifier):
    AWS = "aws"
    AWS_CHINA = "aws-cn"
    AWS_US_GOV = "aws-us-gov"

    @classmethod
    def default(cls) -> "Partition":
        return cls.AWS


class Region(_KnownIdentifier):
    AF_SOUTH_1 = "af-south-1"
    AP_EAST_1 = "ap-east-1"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_NORTHEAST_3 = "ap-northeast-3"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_SOUTH_1 = "ap-south-1"
    CA_CENTRAL_1 = "ca-central-1"
    EU_CENTRAL_1 = "eu-central-1"
    EU_NORTH_1 = "eu-north-1"
    EU_SOUTH_1 = "eu-south-1"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    ME_SOUTH_1 = "me-south-1"
    SA_EAST_1 = "sa-east-1"
    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"


class Service(_KnownIdentifier):
    ACCESS_ANALYZER = "accessanalyzer"
    CERTIFICATE_MANAGER = "acm"
    CERTIFICATE_MANAGER_PRIVATE_CA = "acm-pca"
    AMPLIFY = "amplify"
    API_GATEWAY = "apigateway"
    APP_CONFIG = "appconfig"
    APP_MESH = "appmesh"
    APP_SYNC = "appsync"
    ATHENA = "athena"
    AUTO_SCALING = "autoscaling"
    BACKUP = "backup"
    BATCH = "batch"
    BEDROCK = "bedrock"
    CLOUD_FORMATION = "cloudformation"
    CLOUD_FRONT = "cloudfront"
    CLOUD_HSM = "cloudhsm"
    CLOUD_TRAIL = "cloudtrail"
    CLOUD_WATCH = "cloudwatch"
    CLOUD_WATCH_LOGS = "logs"
    CODE_BUILD = "codebuild"
    CODE_COMMIT = "codecommit"
    CODE_DEPLOY = "codedeploy"
    CODE_PIPELINE = "codepipeline"
    COGNITO_IDENTITY = "cognito-identity"
    COGNITO_IDENTITY_PROVIDER = "cognito-idp"
    COGNITO_SYNC = "cognito-sync"
    CONFIG = "config"
    DATA_PIPELINE = "datapipeline"
    DIRECT_CONNECT = "directconnect"
    DYNAMO_DB = "dynamodb"
    EC2 = "ec2"
    ECR = "ecr"
    ECS = "ecs"
    EKS = "eks"
    ELASTI_CACHE = "elasticache"
    ELASTIC_BEANSTALK = "elasticbeanstalk"
    ELASTIC_FILE_SYSTEM = "elasticfilesystem"
    ELASTIC_LOAD_BALANCING = "elasticloadbalancing"
    ELASTIC_MAP_REDUCE = "elasticmapreduce"
    ELASTICSEARCH = "es"
    EVENT_BRIDGE = "events"
    EXECUTE_API = "execute-api"
    FIREHOSE = "firehose"
    FSX = "fsx"
    GLACIER = "glacier"
    GLUE = "glue"
    GUARD_DUTY = "guardduty"
    IDENTITY_ACCESS_MANAGEMENT = "iam"
    IOT = "iot"
    KEY_MANAGEMENT = "kms"
    KINESIS = "kinesis"
    KINESIS_ANALYTICS = "kinesisanalytics"
    LAMBDA = "lambda"
    ORGANIZATIONS = "organizations"
    QUICK_SIGHT = "quicksight"
    RELATIONAL_DATABASE = "rds"
    REDSHIFT = "redshift"
    RESOURCE_GROUPS = "resource-groups"
    ROUTE53 = "route53"
    S3 = "s3"
    SAGE_MAKER = "sagemaker"
    SECRETS_MANAGER = "secretsmanager"
    SECURITY_HUB = "securityhub"
    SECURITY_TOKEN = "sts"
    SIMPLE_DB = "sdb"
    SIMPLE_EMAIL = "ses"
    SIMPLE_NOTIFICATION = "sns"
    SIMPLE_QUEUE = "sqs"
    SIMPLE_SYSTEMS_MANAGER = "ssm"
    SIMPLE_WORKFLOW = "swf"
    SINGLE_SIGN_ON = "sso"
    STEP_FUNCTIONS = "states"
    STORAGE_GATEWAY = "storagegateway"
    TAGGING = "tag"
    TRANSFER = "transfer"
    WAF = "waf"
    WAF_V2 = "wafv2"
    X_RAY = "xray"
